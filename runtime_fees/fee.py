from fractions import Fraction
from typing import Union as PyUnion
from remerkleable.complex import Container
from remerkleable.basic import uint64
from remerkleable.core import ObjType, ObjParseException


# Gas is metered as an unsigned 64 bit integer, values outside of that range are rejected on construction.
Gas = uint64

MAX_GAS = 2**64 - 1


class InvalidFeesConfig(Exception):
    """The fee schedule is unusable, the runtime must not start with it."""


class GasOverflow(InvalidFeesConfig):
    pass


def safe_add_gas(*values: PyUnion[int, Gas]) -> Gas:
    total = 0
    for v in values:
        total += int(v)
    if total > MAX_GAS:
        raise GasOverflow("gas sum %d does not fit in 64 bits" % total)
    return Gas(total)


def safe_mul_gas(a: PyUnion[int, Gas], b: int) -> Gas:
    if b < 0:
        raise ValueError("cannot multiply gas by negative count %d" % b)
    product = int(a) * int(b)
    if product > MAX_GAS:
        raise GasOverflow("gas product %d * %d does not fit in 64 bits" % (int(a), int(b)))
    return Gas(product)


# Costs associated with an object that can only be sent over the network (and executed by the receiver).
#
# "sir" is short for "sender is receiver": receipts that an account directs to itself
# are guaranteed to not be cross-shard, which is cheaper.
# When the sender is not the receiver the receipt may or may not cross shards.
class Fee(Container):
    # Fee for sending an object from the sender to itself, guaranteeing that it does not leave the shard.
    send_sir: Gas
    # Fee for sending an object potentially across the shards.
    send_not_sir: Gas
    # Fee for executing the object.
    execution: Gas

    @staticmethod
    def free() -> "Fee":
        return Fee(send_sir=0, send_not_sir=0, execution=0)

    @staticmethod
    def uniform(gas: int) -> "Fee":
        return Fee(send_sir=gas, send_not_sir=gas, execution=gas)

    def send_fee(self, sir: bool) -> Gas:
        if sir:
            return self.send_sir
        else:
            return self.send_not_sir

    def exec_fee(self) -> Gas:
        return self.execution

    def min_send_and_exec_fee(self) -> Gas:
        """The minimum fee to send and execute.

        Assumes the cheaper of the two send paths is always available,
        which makes this a lower bound, not the fee that is actually charged."""
        return safe_add_gas(min(self.send_sir, self.send_not_sir), self.execution)


def send_fee(fee: Fee, sir: bool) -> Gas:
    return fee.send_fee(sir)


def exec_fee(fee: Fee) -> Gas:
    return fee.exec_fee()


def min_send_and_exec_fee(fee: Fee) -> Gas:
    return fee.min_send_and_exec_fee()


# Exact fraction, never floating point: the ratios feed into consensus-critical computations.
# Serialized as [numerator, denominator].
class Rational(Container):
    numerator: uint64
    denominator: uint64

    def as_fraction(self) -> Fraction:
        if self.denominator == 0:
            raise InvalidFeesConfig("rational %d/0 has a zero denominator" % self.numerator)
        return Fraction(int(self.numerator), int(self.denominator))

    def to_obj(self) -> ObjType:
        return [int(self.numerator), int(self.denominator)]

    @classmethod
    def from_obj(cls, obj: ObjType) -> "Rational":
        if isinstance(obj, dict):
            if set(obj.keys()) != {'numerator', 'denominator'}:
                raise ObjParseException(f"obj '{obj}' is not a numerator/denominator object")
            return rational(parse_u64_obj(obj['numerator']), parse_u64_obj(obj['denominator']))
        if not isinstance(obj, (list, tuple)) or len(obj) != 2:
            raise ObjParseException(f"obj '{obj}' is not a [numerator, denominator] pair")
        return rational(parse_u64_obj(obj[0]), parse_u64_obj(obj[1]))

    # Ratios compare by value: 6/20 equals 3/10. Containers holding them still compare by encoding.
    def __eq__(self, other):
        if isinstance(other, Rational):
            if self.denominator == 0 or other.denominator == 0:
                return (int(self.numerator), int(self.denominator)) == (int(other.numerator), int(other.denominator))
            return int(self.numerator) * int(other.denominator) == int(other.numerator) * int(self.denominator)
        if isinstance(other, (int, Fraction)) and self.denominator != 0:
            return self.as_fraction() == other
        return NotImplemented

    def __hash__(self):
        if self.denominator == 0:
            return hash((int(self.numerator), 0))
        return hash(self.as_fraction())

    def __repr__(self):
        return "Rational(%d/%d)" % (self.numerator, self.denominator)


def parse_u64_obj(obj: ObjType) -> uint64:
    # bool is an int subclass, but true is not a gas amount.
    if isinstance(obj, bool) or not isinstance(obj, int):
        raise ObjParseException(f"obj '{obj}' is not an unsigned integer")
    return uint64.from_obj(obj)


def rational(numerator: int, denominator: int) -> Rational:
    if denominator == 0:
        raise InvalidFeesConfig("rational %d/0 has a zero denominator" % numerator)
    return Rational(numerator=numerator, denominator=denominator)


def rational_from_integer(n: int) -> Rational:
    return Rational(numerator=n, denominator=1)
