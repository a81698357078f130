import pytest
from fractions import Fraction
from runtime_fees.fee import (
    Fee, Gas, GasOverflow, InvalidFeesConfig, MAX_GAS, Rational,
    send_fee, exec_fee, min_send_and_exec_fee, safe_add_gas, safe_mul_gas, rational, rational_from_integer,
)


def test_send_fee_selects_by_sir():
    fee = Fee(send_sir=1, send_not_sir=2, execution=3)
    assert send_fee(fee, True) == 1
    assert send_fee(fee, False) == 2
    assert fee.send_fee(True) == fee.send_sir
    assert fee.send_fee(False) == fee.send_not_sir
    # selection does not touch the fee
    assert fee.to_obj() == {'send_sir': 1, 'send_not_sir': 2, 'execution': 3}


def test_exec_fee():
    fee = Fee(send_sir=1, send_not_sir=2, execution=3)
    assert exec_fee(fee) == 3
    assert isinstance(fee.exec_fee(), Gas)


@pytest.mark.parametrize("send_sir,send_not_sir,execution", [
    (0, 0, 0),
    (1, 2, 3),
    (5, 2, 3),
    (7, 7, 7),
    (MAX_GAS - 10, 10, 10),
])
def test_min_send_and_exec_fee(send_sir, send_not_sir, execution):
    fee = Fee(send_sir=send_sir, send_not_sir=send_not_sir, execution=execution)
    assert min_send_and_exec_fee(fee) == min(send_sir, send_not_sir) + execution


def test_min_send_and_exec_fee_overflow():
    fee = Fee(send_sir=MAX_GAS, send_not_sir=MAX_GAS, execution=1)
    with pytest.raises(GasOverflow):
        fee.min_send_and_exec_fee()


def test_gas_is_u64():
    with pytest.raises(ValueError):
        Fee(send_sir=-1, send_not_sir=0, execution=0)
    with pytest.raises(ValueError):
        Fee(send_sir=2**64, send_not_sir=0, execution=0)


def test_safe_gas_arithmetic():
    assert safe_add_gas() == 0
    assert safe_add_gas(1, 2, 3) == 6
    assert safe_add_gas(MAX_GAS) == MAX_GAS
    with pytest.raises(GasOverflow):
        safe_add_gas(MAX_GAS, 1)
    assert safe_mul_gas(3, 4) == 12
    with pytest.raises(GasOverflow):
        safe_mul_gas(2**32, 2**32)
    with pytest.raises(ValueError):
        safe_mul_gas(1, -1)


def test_gas_overflow_is_config_error():
    assert issubclass(GasOverflow, InvalidFeesConfig)


def test_free_fee():
    fee = Fee.free()
    assert fee.send_fee(True) == fee.send_fee(False) == fee.exec_fee() == 0
    assert fee.min_send_and_exec_fee() == 0


def test_rational_exact():
    r = rational(103, 100)
    assert r.as_fraction() == Fraction(103, 100)
    assert r.as_fraction() > 1
    assert rational(3, 10).as_fraction() * 10 == 3


def test_rational_zero_denominator():
    with pytest.raises(InvalidFeesConfig):
        rational(1, 0)
    with pytest.raises(InvalidFeesConfig):
        Rational(numerator=1, denominator=0).as_fraction()


def test_rational_obj_form():
    r = rational(3, 10)
    assert r.to_obj() == [3, 10]
    assert Rational.from_obj([3, 10]).as_fraction() == Fraction(3, 10)
    assert Rational.from_obj({'numerator': 3, 'denominator': 10}).to_obj() == [3, 10]
    assert rational_from_integer(0).to_obj() == [0, 1]


def test_rational_compares_by_value():
    assert rational(6, 20) == rational(3, 10)
    assert rational(3, 10) != rational(3, 11)
    assert hash(rational(6, 20)) == hash(rational(3, 10))
    assert rational(3, 10) == Fraction(3, 10)
    assert rational_from_integer(0) == 0
    assert rational(0, 5) == rational_from_integer(0)
    # an invalid ratio only equals the same raw pair
    assert Rational(numerator=1, denominator=0) != Rational(numerator=2, denominator=0)
