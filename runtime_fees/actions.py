from enum import IntEnum
from typing import Iterable, Optional, Tuple
from .fee import Fee, Gas, safe_add_gas, safe_mul_gas
from .config import RuntimeFeesConfig


class ActionKind(IntEnum):
    CREATE_ACCOUNT = 0
    DEPLOY_CONTRACT = 1
    FUNCTION_CALL = 2
    TRANSFER = 3
    STAKE = 4
    ADD_FULL_ACCESS_KEY = 5
    ADD_FUNCTION_CALL_KEY = 6
    DELETE_KEY = 7
    DELETE_ACCOUNT = 8


# An action to be paid for: its kind, and the number of bytes it carries
# (contract code, method name and args, or allowed method names).
ActionCost = Tuple[ActionKind, int]


def action_base_fee(config: RuntimeFeesConfig, kind: ActionKind) -> Fee:
    costs = config.action_creation_config
    if kind == ActionKind.CREATE_ACCOUNT:
        return costs.create_account_cost
    elif kind == ActionKind.DEPLOY_CONTRACT:
        return costs.deploy_contract_cost
    elif kind == ActionKind.FUNCTION_CALL:
        return costs.function_call_cost
    elif kind == ActionKind.TRANSFER:
        return costs.transfer_cost
    elif kind == ActionKind.STAKE:
        return costs.stake_cost
    elif kind == ActionKind.ADD_FULL_ACCESS_KEY:
        return costs.add_key_cost.full_access_cost
    elif kind == ActionKind.ADD_FUNCTION_CALL_KEY:
        return costs.add_key_cost.function_call_cost
    elif kind == ActionKind.DELETE_KEY:
        return costs.delete_key_cost
    elif kind == ActionKind.DELETE_ACCOUNT:
        return costs.delete_account_cost
    else:
        raise ValueError("unknown action kind: %r" % kind)


def action_per_byte_fee(config: RuntimeFeesConfig, kind: ActionKind) -> Optional[Fee]:
    """Per-byte cost triple of the action, None if the action size is not charged for."""
    costs = config.action_creation_config
    if kind == ActionKind.DEPLOY_CONTRACT:
        return costs.deploy_contract_cost_per_byte
    elif kind == ActionKind.FUNCTION_CALL:
        return costs.function_call_cost_per_byte
    elif kind == ActionKind.ADD_FUNCTION_CALL_KEY:
        return costs.add_key_cost.function_call_cost_per_byte
    else:
        return None


def _per_byte(config: RuntimeFeesConfig, kind: ActionKind, num_bytes: int) -> Optional[Fee]:
    per_byte = action_per_byte_fee(config, kind)
    if per_byte is None and num_bytes != 0:
        raise ValueError("action %s is not charged per byte, got %d bytes" % (kind.name, num_bytes))
    return per_byte


def action_send_fee(config: RuntimeFeesConfig, sir: bool, kind: ActionKind, num_bytes: int = 0) -> Gas:
    base = action_base_fee(config, kind).send_fee(sir)
    per_byte = _per_byte(config, kind, num_bytes)
    if per_byte is None:
        return base
    return safe_add_gas(base, safe_mul_gas(per_byte.send_fee(sir), num_bytes))


def action_exec_fee(config: RuntimeFeesConfig, kind: ActionKind, num_bytes: int = 0) -> Gas:
    base = action_base_fee(config, kind).exec_fee()
    per_byte = _per_byte(config, kind, num_bytes)
    if per_byte is None:
        return base
    return safe_add_gas(base, safe_mul_gas(per_byte.exec_fee(), num_bytes))


def data_receipt_send_fee(config: RuntimeFeesConfig, sir: bool, num_bytes: int) -> Gas:
    cfg = config.data_receipt_creation_config
    return safe_add_gas(cfg.base_cost.send_fee(sir), safe_mul_gas(cfg.cost_per_byte.send_fee(sir), num_bytes))


def data_receipt_exec_fee(config: RuntimeFeesConfig, num_bytes: int) -> Gas:
    cfg = config.data_receipt_creation_config
    return safe_add_gas(cfg.base_cost.exec_fee(), safe_mul_gas(cfg.cost_per_byte.exec_fee(), num_bytes))


def action_receipt_send_fee(config: RuntimeFeesConfig, sir: bool, actions: Iterable[ActionCost]) -> Gas:
    """Gas to send an action receipt carrying the given actions."""
    total = config.action_receipt_creation_config.send_fee(sir)
    for kind, num_bytes in actions:
        total = safe_add_gas(total, action_send_fee(config, sir, kind, num_bytes))
    return total


def action_receipt_exec_fee(config: RuntimeFeesConfig, actions: Iterable[ActionCost]) -> Gas:
    total = config.action_receipt_creation_config.exec_fee()
    for kind, num_bytes in actions:
        total = safe_add_gas(total, action_exec_fee(config, kind, num_bytes))
    return total
