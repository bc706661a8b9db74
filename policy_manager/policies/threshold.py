"""High-value threshold policies."""

from abc import ABC
from abc import abstractmethod

from policy_manager.domain.types import PolicyOutput
from policy_manager.engine.filters import HIGH_VALUE_THRESHOLD


class ThresholdPolicy(ABC):
  """
  Base class for high-value threshold policies.

  Subclasses implement compute() to return the exclusive lower bound on
  investment amount.
  """

  @abstractmethod
  def compute(self) -> PolicyOutput[float]:
    """
    Compute high-value threshold.

    Returns:
      PolicyOutput with threshold and diagnostics
    """

class FixedThreshold(ThresholdPolicy):
  """Fixed investment amount threshold."""

  def __init__(self, threshold: float = HIGH_VALUE_THRESHOLD):
    self.threshold = threshold

  def compute(self) -> PolicyOutput[float]:
    """Return fixed threshold."""
    return PolicyOutput(
      value=self.threshold,
      diag={
        'threshold_method': 'fixed',
        'threshold': self.threshold,
      }
    )
