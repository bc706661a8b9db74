"""Manager configuration and policy registry."""

from policy_manager.scenarios.config import ManagerConfig
from policy_manager.scenarios.registry import create_policies
from policy_manager.scenarios.registry import list_policies
from policy_manager.scenarios.registry import POLICY_REGISTRY

__all__ = [
  'ManagerConfig',
  'POLICY_REGISTRY',
  'create_policies',
  'list_policies',
]
