"""
Calculation policies for maturity projection and high-value screening.

Each policy supplies one parameter of a calculation (annual return,
threshold) and returns both a value and diagnostic information.

To add a new policy:
1. Create a new class inheriting from the appropriate base (e.g., RatePolicy)
2. Implement the compute() method returning PolicyOutput
3. Register in scenarios/registry.py
"""

from policy_manager.policies.rate import FixedReturn
from policy_manager.policies.rate import RatePolicy
from policy_manager.policies.threshold import FixedThreshold
from policy_manager.policies.threshold import ThresholdPolicy

__all__ = [
  'RatePolicy', 'FixedReturn',
  'ThresholdPolicy', 'FixedThreshold',
]
