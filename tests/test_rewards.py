from runtime_fees.config import default_fees_config, free_fees_config
from runtime_fees.fee import rational
from runtime_fees import apply_ratio, burnt_gas_reward


def test_burnt_gas_reward():
    config = default_fees_config()
    assert burnt_gas_reward(config, 1000) == 300
    # rounds down
    assert burnt_gas_reward(config, 7) == 2
    assert burnt_gas_reward(config, 0) == 0


def test_burnt_gas_reward_free():
    assert burnt_gas_reward(free_fees_config(), 10**12) == 0


def test_apply_ratio_exact():
    # 103/100 of a value that is not representable exactly as a float product
    amount = 10**18 + 1
    assert apply_ratio(rational(103, 100), amount) == (amount * 103) // 100
    assert apply_ratio(default_fees_config().pessimistic_gas_price_inflation_ratio, 100) == 103
