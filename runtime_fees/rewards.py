from .fee import Gas, Rational, safe_add_gas
from .config import RuntimeFeesConfig


def apply_ratio(ratio: Rational, amount: int) -> int:
    """Multiplies amount by the ratio, rounding down. The result is not bounded to 64 bits."""
    frac = ratio.as_fraction()
    return (int(amount) * frac.numerator) // frac.denominator


def burnt_gas_reward(config: RuntimeFeesConfig, gas_burnt: int) -> Gas:
    """Share of the burnt gas that is rewarded to the contract account whose code ran."""
    return safe_add_gas(apply_ratio(config.burnt_gas_reward, gas_burnt))
