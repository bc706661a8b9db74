"""
Annual return policies.

These policies determine the annual return used to project maturity
values. Only fixed, non-negative rates are supported.
"""

from abc import ABC
from abc import abstractmethod

from policy_manager.domain.errors import InvalidArgument
from policy_manager.domain.types import PolicyOutput
from policy_manager.engine.maturity import ANNUAL_RETURN


class RatePolicy(ABC):
  """
  Base class for annual return policies.

  Subclasses implement compute() to return an annual return.
  """

  @abstractmethod
  def compute(self) -> PolicyOutput[float]:
    """
    Compute annual return.

    Returns:
      PolicyOutput with annual return and diagnostics
    """

class FixedReturn(RatePolicy):
  """
  Fixed annual return.

  Simple policy that returns a constant rate.
  """

  def __init__(self, rate: float = ANNUAL_RETURN):
    """
    Initialize fixed return policy.

    Args:
      rate: Fixed annual return (default: 8%)

    Raises:
      InvalidArgument: If rate is negative
    """
    if rate < 0:
      raise InvalidArgument(f'annual rate must be non-negative, got {rate}')
    self.rate = rate

  def compute(self) -> PolicyOutput[float]:
    """Return fixed annual return."""
    return PolicyOutput(
      value=self.rate,
      diag={
        'rate_method': 'fixed',
        'annual_rate': self.rate,
      }
    )
