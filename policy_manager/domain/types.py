'''
Domain types for policy management.

These dataclasses provide typed interfaces between the store, the
calculation engines and the console, so that none of them pass raw
dicts around.
'''

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from policy_manager.domain.errors import InvalidArgument
from policy_manager.domain.validation import require_non_negative_int
from policy_manager.domain.validation import require_non_negative_number

T = TypeVar('T')


@dataclass
class PolicyOutput(Generic[T]):
  '''
  Standard output from any policy.

  Every policy returns both a computed value and diagnostic information
  explaining how the value was computed.

  Attributes:
    value: The computed value (type depends on policy)
    diag: Dictionary of diagnostic information
  '''
  value: T
  diag: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PolicyRecord:
  '''
  A single policy holder.

  Records are immutable; a stored record is replaced by removing it and
  inserting a new one.

  Attributes:
    policy_id: Unique, non-empty identifier
    name: Policy holder name, non-empty
    investment_amount: Invested principal (>= 0), or None when unknown
    years_in_force: Whole years the policy has been in force (>= 0)
  '''
  policy_id: str
  name: str
  investment_amount: Optional[float]
  years_in_force: int

  def __post_init__(self) -> None:
    if not isinstance(self.policy_id, str) or not self.policy_id.strip():
      raise InvalidArgument('policy_id must be a non-empty string')
    if not isinstance(self.name, str) or not self.name.strip():
      raise InvalidArgument('name must be a non-empty string')
    if self.investment_amount is not None:
      require_non_negative_number(self.investment_amount, 'investment_amount')
    require_non_negative_int(self.years_in_force, 'years_in_force')

  @property
  def has_investment_amount(self) -> bool:
    '''True when the investment amount is known.'''
    return self.investment_amount is not None

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary for DataFrame creation.'''
    return {
        'policy_id': self.policy_id,
        'name': self.name,
        'investment_amount': self.investment_amount,
        'years_in_force': self.years_in_force,
    }


@dataclass
class MaturityResult:
  '''
  Projected maturity value with the inputs used to compute it.

  Attributes:
    principal: Invested amount the projection starts from
    years: Number of compounding years
    annual_rate: Annual return applied each year
    future_value: principal * (1 + annual_rate) ** years
    policy_id: Source policy, or None for ad-hoc values
    diag: Diagnostics from the rate policy
  '''
  principal: float
  years: int
  annual_rate: float
  future_value: float
  policy_id: Optional[str] = None
  diag: Dict[str, Any] = field(default_factory=dict)

  @property
  def growth(self) -> float:
    '''Absolute gain over the principal.'''
    return self.future_value - self.principal
