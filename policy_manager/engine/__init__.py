'''Pure calculation engines for maturity projection and filtering.'''

from policy_manager.engine.filters import find_high_value
from policy_manager.engine.filters import HIGH_VALUE_THRESHOLD
from policy_manager.engine.maturity import ANNUAL_RETURN
from policy_manager.engine.maturity import compute_future_value

__all__ = [
    'ANNUAL_RETURN',
    'HIGH_VALUE_THRESHOLD',
    'compute_future_value',
    'find_high_value',
]
