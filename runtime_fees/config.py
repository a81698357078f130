import json
from typing import Iterator, Tuple, TextIO, Type
from remerkleable.complex import Container
from remerkleable.basic import uint64
from remerkleable.core import ObjType, ObjParseException
from .fee import Fee, Gas, Rational, InvalidFeesConfig, GasOverflow, safe_add_gas, rational, rational_from_integer
from . import params


# Describes the cost of creating a data receipt, a receipt carrying the result of a
# previous execution to a receipt that depends on it.
class DataReceiptCreationConfig(Container):
    # Base cost of creating a data receipt.
    base_cost: Fee
    # Additional cost per byte sent.
    cost_per_byte: Fee


# Describes the cost of creating an access key.
class AccessKeyCreationConfig(Container):
    # Base cost of creating a full access access-key.
    full_access_cost: Fee
    # Base cost of creating an access-key restricted to specific functions.
    function_call_cost: Fee
    # Cost per byte of method_names of creating a restricted access-key.
    function_call_cost_per_byte: Fee


# Describes the cost of creating a specific action. Includes all variants.
class ActionCreationConfig(Container):
    create_account_cost: Fee

    deploy_contract_cost: Fee
    deploy_contract_cost_per_byte: Fee

    function_call_cost: Fee
    # Per byte of method name and arguments.
    function_call_cost_per_byte: Fee

    transfer_cost: Fee

    stake_cost: Fee

    add_key_cost: AccessKeyCreationConfig

    delete_key_cost: Fee

    delete_account_cost: Fee


# Storage accounting parameters. These are byte counts, not gas.
class StorageUsageConfig(Container):
    # Number of bytes for an account record, including rounding up for account id.
    num_bytes_account: uint64
    # Additional number of bytes for a k/v record.
    num_extra_bytes_record: uint64


class RuntimeFeesConfig(Container):
    # Cost of creating an action receipt, excluding the cost of the actions themselves.
    action_receipt_creation_config: Fee
    data_receipt_creation_config: DataReceiptCreationConfig
    action_creation_config: ActionCreationConfig
    storage_usage_config: StorageUsageConfig

    # Fraction of the burnt gas to reward to the contract account for execution.
    burnt_gas_reward: Rational

    pessimistic_gas_price_inflation_ratio: Rational

    @staticmethod
    def free() -> "RuntimeFeesConfig":
        """Schedule that charges nothing, for simulating execution without paying for it."""
        return RuntimeFeesConfig(
            action_receipt_creation_config=Fee.free(),
            data_receipt_creation_config=DataReceiptCreationConfig(
                base_cost=Fee.free(),
                cost_per_byte=Fee.free(),
            ),
            action_creation_config=ActionCreationConfig(
                create_account_cost=Fee.free(),
                deploy_contract_cost=Fee.free(),
                deploy_contract_cost_per_byte=Fee.free(),
                function_call_cost=Fee.free(),
                function_call_cost_per_byte=Fee.free(),
                transfer_cost=Fee.free(),
                stake_cost=Fee.free(),
                add_key_cost=AccessKeyCreationConfig(
                    full_access_cost=Fee.free(),
                    function_call_cost=Fee.free(),
                    function_call_cost_per_byte=Fee.free(),
                ),
                delete_key_cost=Fee.free(),
                delete_account_cost=Fee.free(),
            ),
            storage_usage_config=StorageUsageConfig(
                num_bytes_account=0,
                num_extra_bytes_record=0,
            ),
            burnt_gas_reward=rational_from_integer(0),
            pessimistic_gas_price_inflation_ratio=rational_from_integer(0),
        )

    def min_receipt_with_function_call_gas(self) -> Gas:
        """The minimum amount of gas required to create and execute a new receipt with a function call action.

        This is used to determine how many receipts can be created, sent and executed
        for some amount of prepaid gas using function calls."""
        return safe_add_gas(
            self.action_receipt_creation_config.min_send_and_exec_fee(),
            self.action_creation_config.function_call_cost.min_send_and_exec_fee(),
        )

    def data_receipt_min_send_and_exec_fee(self) -> Gas:
        return self.data_receipt_creation_config.base_cost.min_send_and_exec_fee()


def default_fees_config() -> RuntimeFeesConfig:
    """The protocol's canonical fee schedule, validated. Every call returns a new, equal, value."""
    return validate_fees_config(RuntimeFeesConfig(
        action_receipt_creation_config=Fee.uniform(params.ACTION_RECEIPT_CREATION_GAS),
        data_receipt_creation_config=DataReceiptCreationConfig(
            base_cost=Fee.uniform(params.DATA_RECEIPT_CREATION_BASE_GAS),
            cost_per_byte=Fee.uniform(params.DATA_RECEIPT_CREATION_PER_BYTE_GAS),
        ),
        action_creation_config=ActionCreationConfig(
            create_account_cost=Fee.uniform(params.CREATE_ACCOUNT_GAS),
            deploy_contract_cost=Fee.uniform(params.DEPLOY_CONTRACT_GAS),
            deploy_contract_cost_per_byte=Fee.uniform(params.DEPLOY_CONTRACT_PER_BYTE_GAS),
            function_call_cost=Fee.uniform(params.FUNCTION_CALL_GAS),
            function_call_cost_per_byte=Fee.uniform(params.FUNCTION_CALL_PER_BYTE_GAS),
            transfer_cost=Fee.uniform(params.TRANSFER_GAS),
            stake_cost=Fee.uniform(params.STAKE_GAS),
            add_key_cost=AccessKeyCreationConfig(
                full_access_cost=Fee.uniform(params.ADD_FULL_ACCESS_KEY_GAS),
                function_call_cost=Fee.uniform(params.ADD_FUNCTION_CALL_KEY_GAS),
                function_call_cost_per_byte=Fee.uniform(params.ADD_FUNCTION_CALL_KEY_PER_BYTE_GAS),
            ),
            delete_key_cost=Fee.uniform(params.DELETE_KEY_GAS),
            delete_account_cost=Fee.uniform(params.DELETE_ACCOUNT_GAS),
        ),
        storage_usage_config=StorageUsageConfig(
            num_bytes_account=params.NUM_BYTES_ACCOUNT,
            num_extra_bytes_record=params.NUM_EXTRA_BYTES_RECORD,
        ),
        burnt_gas_reward=rational(params.BURNT_GAS_REWARD_NUMERATOR, params.BURNT_GAS_REWARD_DENOMINATOR),
        pessimistic_gas_price_inflation_ratio=rational(
            params.PESSIMISTIC_GAS_PRICE_INFLATION_NUMERATOR,
            params.PESSIMISTIC_GAS_PRICE_INFLATION_DENOMINATOR,
        ),
    ))


def free_fees_config() -> RuntimeFeesConfig:
    return RuntimeFeesConfig.free()


def min_receipt_with_function_call_gas(config: RuntimeFeesConfig) -> Gas:
    return config.min_receipt_with_function_call_gas()


def check_data_receipt_cost_invariant(config: RuntimeFeesConfig) -> None:
    # The deepest receipt chains are assumed to come from recursive function calls
    # (a function call creating a function call promise).
    # A data receipt dependency executes in a later block too, so it must not be cheaper,
    # otherwise the maximum depth computed from prepaid gas is wrong.
    data_cost = config.data_receipt_min_send_and_exec_fee()
    call_cost = config.min_receipt_with_function_call_gas()
    if data_cost < call_cost:
        raise InvalidFeesConfig(
            "data receipt min send and exec fee %d is cheaper than a receipt with a function call %d"
            % (data_cost, call_cost))


def iter_fees(obj: Container, path: str = "") -> Iterator[Tuple[str, Fee]]:
    """Walks all cost triples in the config, in field order, with their dotted path."""
    for name in obj.__class__.fields().keys():
        value = getattr(obj, name)
        key = path + name
        if isinstance(value, Fee):
            yield key, value
        elif isinstance(value, Container) and not isinstance(value, Rational):
            yield from iter_fees(value, key + ".")


def validate_fees_config(config: RuntimeFeesConfig) -> RuntimeFeesConfig:
    for key, fee in iter_fees(config):
        try:
            fee.min_send_and_exec_fee()
            safe_add_gas(max(fee.send_sir, fee.send_not_sir), fee.execution)
        except GasOverflow as e:
            raise GasOverflow("%s: %s" % (key, e)) from e
    for key in ('burnt_gas_reward', 'pessimistic_gas_price_inflation_ratio'):
        ratio: Rational = getattr(config, key)
        if ratio.denominator == 0:
            raise InvalidFeesConfig("%s has a zero denominator" % key)
    check_data_receipt_cost_invariant(config)
    return config


def _check_complete(typ: Type[Container], obj: ObjType, path: str) -> None:
    # remerkleable zero-fills missing fields, a missing cost entry must be an error instead.
    if not isinstance(obj, dict):
        raise InvalidFeesConfig("%s: expected an object, got %r" % (path or "config", obj))
    fields = typ.fields()
    for k in obj.keys():
        if k not in fields:
            raise InvalidFeesConfig("%s: unknown field %s" % (path or "config", k))
    for name, ftype in fields.items():
        key = path + name
        if name not in obj:
            raise InvalidFeesConfig("missing field %s" % key)
        if issubclass(ftype, Container) and not issubclass(ftype, Rational):
            _check_complete(ftype, obj[name], key + ".")
        elif isinstance(obj[name], bool):
            raise InvalidFeesConfig("%s: expected an unsigned integer, got %r" % (key, obj[name]))


def load_fees_config(obj: ObjType) -> RuntimeFeesConfig:
    """Parses a fee schedule from its object form (as produced by to_obj) and validates it."""
    _check_complete(RuntimeFeesConfig, obj, "")
    try:
        config = RuntimeFeesConfig.from_obj(obj)
    except (ObjParseException, ValueError, TypeError, KeyError) as e:
        raise InvalidFeesConfig("failed to parse fees config: %s" % e) from e
    return validate_fees_config(config)


def load_fees_config_json(stream: TextIO) -> RuntimeFeesConfig:
    try:
        obj = json.load(stream)
    except json.JSONDecodeError as e:
        raise InvalidFeesConfig("fees config is not valid json: %s" % e) from e
    return load_fees_config(obj)


def fees_config_to_json(config: RuntimeFeesConfig) -> str:
    return json.dumps(config.to_obj(), indent=2)
