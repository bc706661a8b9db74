"""
Policy registry for mapping string names to policy factories.

This lets configurations name policies with plain strings while still
instantiating the correct policy classes.

To add a new policy:
1. Implement the policy class in the appropriate module
   (e.g., policies/rate.py)
2. Register a factory in the matching dictionary below

Example:
  RATE_POLICIES['fixed_0p065'] = lambda: FixedReturn(rate=0.065)
"""

from collections.abc import Callable
from typing import Any, cast

from policy_manager.policies.rate import FixedReturn
from policy_manager.policies.rate import RatePolicy
from policy_manager.policies.threshold import FixedThreshold
from policy_manager.policies.threshold import ThresholdPolicy
from policy_manager.scenarios.config import ManagerConfig

RATE_POLICIES: dict[str, Callable[[], RatePolicy]] = {
    'fixed_0p00': lambda: FixedReturn(rate=0.0),
    'fixed_0p04': lambda: FixedReturn(rate=0.04),
    'fixed_0p06': lambda: FixedReturn(rate=0.06),
    'fixed_0p08': lambda: FixedReturn(rate=0.08),
    'fixed_0p10': lambda: FixedReturn(rate=0.10),
    'fixed_0p12': lambda: FixedReturn(rate=0.12),
}

THRESHOLD_POLICIES: dict[str, Callable[[], ThresholdPolicy]] = {
    'fixed_50k': lambda: FixedThreshold(threshold=50000.0),
    'fixed_100k': lambda: FixedThreshold(threshold=100000.0),
    'fixed_250k': lambda: FixedThreshold(threshold=250000.0),
    'fixed_1m': lambda: FixedThreshold(threshold=1000000.0),
}

POLICY_REGISTRY = {
    'rate': RATE_POLICIES,
    'threshold': THRESHOLD_POLICIES,
}


def create_policies(config: ManagerConfig) -> dict[str, Any]:
  """
  Create policy instances from configuration.

  Args:
    config: ManagerConfig specifying policy names

  Returns:
    Dictionary with instantiated policy objects:
    - rate: RatePolicy
    - threshold: ThresholdPolicy

  Raises:
    KeyError: If a policy name is not found in the registry
  """
  try:
    rate_factory = RATE_POLICIES[config.rate]
  except KeyError as e:
    raise KeyError(f"Unknown rate policy: '{config.rate}'. "
                   f'Available: {list(RATE_POLICIES.keys())}') from e

  try:
    threshold_factory = THRESHOLD_POLICIES[config.threshold]
  except KeyError as e:
    raise KeyError(f"Unknown threshold policy: '{config.threshold}'. "
                   f'Available: {list(THRESHOLD_POLICIES.keys())}') from e

  return {
      'rate': rate_factory(),
      'threshold': threshold_factory(),
  }

def list_policies() -> dict[str, list[str]]:
  """
  List all available policies by category.

  Returns:
    Dictionary mapping category names to list of policy names
  """
  result: dict[str, list[str]] = {}
  for category, policies_dict in POLICY_REGISTRY.items():
    policy_dict = cast(dict[str, object], policies_dict)
    result[category] = list(policy_dict.keys())
  return result
