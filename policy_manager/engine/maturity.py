"""
Pure maturity value engine.

No I/O and no store access: the caller passes the principal and term and
gets a number back.
"""

import math

from policy_manager.domain.validation import require_non_negative_int
from policy_manager.domain.validation import require_non_negative_number

ANNUAL_RETURN = 0.08


def compute_future_value(
    principal: float,
    years: int,
    annual_rate: float = ANNUAL_RETURN,
) -> float:
  """
  Compute the value of a principal compounded once a year.

  Args:
    principal: Amount invested (finite, >= 0)
    years: Number of whole compounding years (int, >= 0)
    annual_rate: Annual return (default: 8%)

  Returns:
    principal * (1 + annual_rate) ** years, or inf when the growth factor
    exceeds the float range

  Raises:
    InvalidArgument: If principal is negative or not a finite number, or
      years is negative or not an integer
  """
  require_non_negative_number(principal, 'principal')
  require_non_negative_int(years, 'years')

  if principal == 0:
    return 0.0

  try:
    factor = (1.0 + annual_rate)**years
  except OverflowError:
    return math.inf
  return principal * factor
