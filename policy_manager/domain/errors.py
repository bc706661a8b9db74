"""
Error taxonomy for policy management.

All errors are recoverable: the console reports them and keeps running.
"""


class PolicyManagerError(Exception):
  """Base class for all policy management errors."""


class InvalidArgument(PolicyManagerError, ValueError):
  """A value is outside its allowed domain (e.g. a negative principal)."""


class DuplicateKey(PolicyManagerError, ValueError):
  """A record with the same policy id is already stored."""

  def __init__(self, policy_id: str):
    super().__init__(f'A policy with id {policy_id!r} already exists')
    self.policy_id = policy_id


class NotFound(PolicyManagerError, LookupError):
  """No record is stored under the requested policy id."""

  def __init__(self, policy_id: str):
    super().__init__(f'No policy found with id: {policy_id}')
    self.policy_id = policy_id
