from .fee import (
    Gas, Fee, Rational, InvalidFeesConfig, GasOverflow,
    send_fee, exec_fee, min_send_and_exec_fee, rational, rational_from_integer,
)
from .config import (
    RuntimeFeesConfig, DataReceiptCreationConfig, ActionCreationConfig, AccessKeyCreationConfig,
    StorageUsageConfig, default_fees_config, free_fees_config, min_receipt_with_function_call_gas,
    check_data_receipt_cost_invariant, validate_fees_config, load_fees_config, load_fees_config_json,
)
from .actions import ActionKind
from .rewards import apply_ratio, burnt_gas_reward
