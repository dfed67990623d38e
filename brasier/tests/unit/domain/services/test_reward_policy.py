"""
Unit tests for the reward policy.

Usage:
    python -m tests.unit.domain.services.test_reward_policy
    pytest brasier/tests/unit
"""

from decimal import Decimal

from brasier.domain.services.reward_policy import RewardPolicy
from shared.tests import LaborantTest


class TestRewardPolicy(LaborantTest):
    """Unit tests for RewardPolicy."""

    component_name = "brasier"
    test_category = "unit"

    def test_default_rate(self):
        """Test 1 token burned is worth 100 in-game currency."""
        self.reporter.info("Testing default reward rate", context="Test")

        policy = RewardPolicy()

        assert policy.rate == 100
        assert policy.reward(Decimal("1")) == 100
        assert policy.reward(Decimal("5")) == 500

    def test_reward_is_floored(self):
        """Test fractional rewards round down."""
        self.reporter.info("Testing reward flooring", context="Test")

        policy = RewardPolicy()

        assert policy.reward(Decimal("1.23456789")) == 123
        assert policy.reward(Decimal("0.009")) == 0
        assert policy.reward(Decimal("0.019999")) == 1

    def test_reward_is_monotonic(self):
        """Test larger burns never earn less."""
        self.reporter.info("Testing reward monotonicity", context="Test")

        policy = RewardPolicy(rate=7)
        amounts = [Decimal(n) / Decimal(100) for n in range(0, 500, 3)]
        rewards = [policy.reward(a) for a in amounts]

        assert rewards == sorted(rewards)

    def test_zero_amount(self):
        """Test a zero burn earns nothing."""
        self.reporter.info("Testing zero amount", context="Test")

        assert RewardPolicy().reward(Decimal("0")) == 0

    def test_reject_negative_amount(self):
        """Test negative amounts are rejected."""
        self.reporter.info("Testing negative amount", context="Test")

        try:
            RewardPolicy().reward(Decimal("-1"))
            assert False, "Should have raised ValueError"
        except ValueError:
            self.reporter.info("Negative amount rejected", context="Test")

    def test_reject_negative_rate(self):
        """Test negative rates are rejected."""
        self.reporter.info("Testing negative rate", context="Test")

        try:
            RewardPolicy(rate=-1)
            assert False, "Should have raised ValueError"
        except ValueError:
            self.reporter.info("Negative rate rejected", context="Test")


if __name__ == "__main__":
    TestRewardPolicy.run_as_main()
