# Protocol fee parameters of the default runtime fee schedule.
# Any change to these values is a protocol change and needs a new protocol version.
#
# Every triple in the shipped table charges the same amount for sending to self,
# sending potentially across shards, and executing.

ACTION_RECEIPT_CREATION_GAS = 151021812500  # Per action receipt, independent of the actions it carries.

DATA_RECEIPT_CREATION_BASE_GAS = 4697339419375  # Per data receipt. Must keep data receipts as expensive as a function call receipt.
DATA_RECEIPT_CREATION_PER_BYTE_GAS = 23982274  # Per byte of data carried by a data receipt.

CREATE_ACCOUNT_GAS = 130476125000  # Per CreateAccount action.
DEPLOY_CONTRACT_GAS = 222739562500  # Per DeployContract action.
DEPLOY_CONTRACT_PER_BYTE_GAS = 6846508  # Per byte of deployed contract code.
FUNCTION_CALL_GAS = 2614094875000  # Per FunctionCall action.
FUNCTION_CALL_PER_BYTE_GAS = 2521519  # Per byte of method name and arguments of a function call.
TRANSFER_GAS = 159813250000  # Per Transfer action.
STAKE_GAS = 167840812500  # Per Stake action.

ADD_FULL_ACCESS_KEY_GAS = 137640187500  # Per AddKey action with a full access key.
ADD_FUNCTION_CALL_KEY_GAS = 135268437500  # Per AddKey action with a key restricted to function calls.
ADD_FUNCTION_CALL_KEY_PER_BYTE_GAS = 22361438  # Per byte of method names allowed by a restricted key.

DELETE_KEY_GAS = 122405750000  # Per DeleteKey action.
DELETE_ACCOUNT_GAS = 205135750000  # Per DeleteAccount action.

# Storage accounting, in bytes, not gas.
NUM_BYTES_ACCOUNT = 100  # Bytes charged for an account record, including rounding up for the account id.
NUM_EXTRA_BYTES_RECORD = 40  # Additional bytes charged for every key/value record.

# Fraction of the burnt gas rewarded to the contract account for execution.
BURNT_GAS_REWARD_NUMERATOR = 3
BURNT_GAS_REWARD_DENOMINATOR = 10

# Multiplier for pessimistically reserving gas when the price at execution time is not known yet.
PESSIMISTIC_GAS_PRICE_INFLATION_NUMERATOR = 103
PESSIMISTIC_GAS_PRICE_INFLATION_DENOMINATOR = 100
