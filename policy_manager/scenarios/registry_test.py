import pytest

from policy_manager.policies.rate import RatePolicy
from policy_manager.policies.threshold import ThresholdPolicy
from policy_manager.scenarios.config import ManagerConfig
from policy_manager.scenarios.registry import create_policies
from policy_manager.scenarios.registry import list_policies


class TestCreatePolicies:
  """Tests for create_policies function."""

  def test_default_config(self):
    """Default config creates an 8% rate and a 100k threshold."""
    policies = create_policies(ManagerConfig.default())

    assert isinstance(policies['rate'], RatePolicy)
    assert isinstance(policies['threshold'], ThresholdPolicy)
    assert policies['rate'].compute().value == 0.08
    assert policies['threshold'].compute().value == 100000.0

  def test_custom_config(self):
    """Named policies are resolved from the registry."""
    config = ManagerConfig(rate='fixed_0p12', threshold='fixed_1m')

    policies = create_policies(config)

    assert policies['rate'].compute().value == 0.12
    assert policies['threshold'].compute().value == 1000000.0

  def test_unknown_rate(self):
    """Unknown rate policy lists the available names."""
    config = ManagerConfig(rate='fixed_0p99')

    with pytest.raises(KeyError, match="Unknown rate policy: 'fixed_0p99'"):
      create_policies(config)

  def test_unknown_threshold(self):
    """Unknown threshold policy raises KeyError."""
    config = ManagerConfig(threshold='huge')

    with pytest.raises(KeyError, match='Unknown threshold policy'):
      create_policies(config)


class TestListPolicies:
  """Tests for list_policies function."""

  def test_categories(self):
    """Every category is listed with its names."""
    result = list_policies()

    assert set(result) == {'rate', 'threshold'}
    assert 'fixed_0p08' in result['rate']
    assert 'fixed_100k' in result['threshold']
