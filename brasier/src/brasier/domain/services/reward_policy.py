"""
Reward policy - converts a verified burn into in-game currency.
"""

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

# 1 token burned = 100 in-game currency
DEFAULT_BURN_REWARD_RATE = 100


@dataclass(frozen=True)
class RewardPolicy:
    """
    Fixed-rate reward policy.

    reward = floor(amount_burned * rate). Pure and monotonically
    non-decreasing in amount_burned.
    """

    rate: int = DEFAULT_BURN_REWARD_RATE

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError("Reward rate cannot be negative")

    def reward(self, amount_burned: Decimal) -> int:
        """
        Compute the in-game reward for a burned amount.

        Raises:
            ValueError: If amount_burned is negative
        """
        if amount_burned < 0:
            raise ValueError("Burned amount cannot be negative")
        return int((amount_burned * self.rate).to_integral_value(rounding=ROUND_FLOOR))
