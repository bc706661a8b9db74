import dataclasses

import pytest

from policy_manager.domain.errors import DuplicateKey
from policy_manager.domain.errors import InvalidArgument
from policy_manager.domain.errors import NotFound
from policy_manager.domain.errors import PolicyManagerError
from policy_manager.domain.types import MaturityResult
from policy_manager.domain.types import PolicyOutput
from policy_manager.domain.types import PolicyRecord


class TestPolicyRecord:
  """Tests for PolicyRecord dataclass."""

  def test_normal_case(self):
    """Construct with valid fields."""
    record = PolicyRecord('PH-001', 'Jane Doe', 120000.0, 5)

    assert record.policy_id == 'PH-001'
    assert record.name == 'Jane Doe'
    assert record.investment_amount == 120000.0
    assert record.years_in_force == 5
    assert record.has_investment_amount

  def test_missing_amount_allowed(self):
    """None marks an unknown investment amount."""
    record = PolicyRecord('PH-001', 'Jane Doe', None, 0)

    assert record.investment_amount is None
    assert not record.has_investment_amount

  def test_zero_values_allowed(self):
    """Zero amount and zero years are valid."""
    record = PolicyRecord('PH-001', 'Jane Doe', 0.0, 0)

    assert record.investment_amount == 0.0
    assert record.years_in_force == 0

  @pytest.mark.parametrize('policy_id', ['', '   '])
  def test_empty_policy_id(self, policy_id):
    """Blank policy id raises InvalidArgument."""
    with pytest.raises(InvalidArgument, match='policy_id'):
      PolicyRecord(policy_id, 'Jane Doe', 1.0, 1)

  @pytest.mark.parametrize('name', ['', '  \t'])
  def test_empty_name(self, name):
    """Blank name raises InvalidArgument."""
    with pytest.raises(InvalidArgument, match='name'):
      PolicyRecord('PH-001', name, 1.0, 1)

  def test_negative_amount(self):
    """Negative investment amount raises InvalidArgument."""
    with pytest.raises(InvalidArgument, match='investment_amount'):
      PolicyRecord('PH-001', 'Jane Doe', -0.01, 1)

  def test_negative_years(self):
    """Negative years raises InvalidArgument."""
    with pytest.raises(InvalidArgument, match='non-negative'):
      PolicyRecord('PH-001', 'Jane Doe', 1.0, -1)

  @pytest.mark.parametrize('years', [2.5, '3', True])
  def test_non_integer_years(self, years):
    """Years must be a plain int."""
    with pytest.raises(InvalidArgument, match='integer'):
      PolicyRecord('PH-001', 'Jane Doe', 1.0, years)

  def test_immutable(self):
    """Fields cannot be reassigned after construction."""
    record = PolicyRecord('PH-001', 'Jane Doe', 1.0, 1)

    with pytest.raises(dataclasses.FrozenInstanceError):
      record.name = 'Other'  # type: ignore[misc]

  def test_equality(self):
    """Records with equal fields compare equal."""
    assert (PolicyRecord('PH-001', 'A', 1.0, 1) ==
            PolicyRecord('PH-001', 'A', 1.0, 1))

  def test_to_dict(self):
    """Convert to dictionary."""
    d = PolicyRecord('PH-002', 'John Roe', 75000.0, 3).to_dict()

    assert d == {
        'policy_id': 'PH-002',
        'name': 'John Roe',
        'investment_amount': 75000.0,
        'years_in_force': 3,
    }


class TestMaturityResult:
  """Tests for MaturityResult dataclass."""

  def test_growth_property(self):
    """growth is the gain over the principal."""
    result = MaturityResult(principal=1000.0,
                            years=2,
                            annual_rate=0.10,
                            future_value=1210.0)

    assert result.growth == pytest.approx(210.0)
    assert result.policy_id is None
    assert result.diag == {}


class TestPolicyOutput:
  """Tests for PolicyOutput dataclass."""

  def test_default_diag(self):
    """diag defaults to an empty dict per instance."""
    a = PolicyOutput(value=1)
    b = PolicyOutput(value=2)
    a.diag['x'] = 1

    assert b.diag == {}


class TestErrors:
  """Tests for the error taxonomy."""

  def test_duplicate_key(self):
    """DuplicateKey carries the offending id."""
    err = DuplicateKey('PH-001')

    assert err.policy_id == 'PH-001'
    assert 'PH-001' in str(err)
    assert isinstance(err, PolicyManagerError)

  def test_not_found(self):
    """NotFound is a LookupError with the missing id."""
    err = NotFound('PH-404')

    assert err.policy_id == 'PH-404'
    assert str(err) == 'No policy found with id: PH-404'
    assert isinstance(err, LookupError)
    assert isinstance(err, PolicyManagerError)

  def test_invalid_argument(self):
    """InvalidArgument is a ValueError."""
    assert issubclass(InvalidArgument, ValueError)
    assert issubclass(InvalidArgument, PolicyManagerError)


class TestPolicyRecordAmountValidation:
  """Tests for investment amount checks on PolicyRecord."""

  @pytest.mark.parametrize('amount', [float('nan'), float('inf')])
  def test_non_finite_amount(self, amount):
    """NaN and infinite amounts raise InvalidArgument."""
    with pytest.raises(InvalidArgument, match='finite'):
      PolicyRecord('A', 'B', amount, 1)

  @pytest.mark.parametrize('amount', ['5', True])
  def test_non_numeric_amount(self, amount):
    """Strings and bools raise InvalidArgument, not TypeError."""
    with pytest.raises(InvalidArgument, match='must be a number'):
      PolicyRecord('A', 'B', amount, 1)

  def test_int_amount_allowed(self):
    """Whole-number amounts are accepted."""
    assert PolicyRecord('A', 'B', 5, 1).investment_amount == 5
