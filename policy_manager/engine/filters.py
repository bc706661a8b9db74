"""High-value policy selection."""

from collections.abc import Iterable

from policy_manager.domain.types import PolicyRecord

HIGH_VALUE_THRESHOLD = 100000.0


def find_high_value(
    records: Iterable[PolicyRecord],
    threshold: float = HIGH_VALUE_THRESHOLD,
) -> list[PolicyRecord]:
  """
  Select records whose investment amount is strictly above a threshold.

  Records without an investment amount never match. The input is not
  modified and the relative order of matches is preserved.

  Args:
    records: Policy records to scan
    threshold: Exclusive lower bound on investment amount (default: 100,000)

  Returns:
    Matching records, possibly empty
  """
  return [
      r for r in records
      if r.has_investment_amount and r.investment_amount > threshold
  ]
