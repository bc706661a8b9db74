"""Argument checks shared by the domain types and the engines."""

import math
from typing import Any

from policy_manager.domain.errors import InvalidArgument


def require_non_negative_number(value: Any, name: str) -> float:
  """
  Check that value is a finite, non-negative int or float.

  Returns:
    value as a float

  Raises:
    InvalidArgument: If value is not a number, is a bool, is NaN or
      infinite, or is negative
  """
  if isinstance(value, bool) or not isinstance(value, (int, float)):
    raise InvalidArgument(f'{name} must be a number, got {value!r}')
  if not math.isfinite(value):
    raise InvalidArgument(f'{name} must be finite, got {value}')
  if value < 0:
    raise InvalidArgument(f'{name} must be non-negative, got {value}')
  return float(value)


def require_non_negative_int(value: Any, name: str) -> int:
  """
  Check that value is a non-negative int (bool is rejected).

  Raises:
    InvalidArgument: If value is not an int or is negative
  """
  if isinstance(value, bool) or not isinstance(value, int):
    raise InvalidArgument(f'{name} must be an integer, got {value!r}')
  if value < 0:
    raise InvalidArgument(f'{name} must be non-negative, got {value}')
  return value
