import pytest

from policy_manager.domain.types import PolicyRecord
from policy_manager.store import PolicyStore


def _make_records(
    amounts: list[float | None],
    years: list[int] | None = None,
) -> list[PolicyRecord]:
  """Helper to create numbered PolicyRecords from value lists."""
  records: list[PolicyRecord] = []
  for i, amount in enumerate(amounts, start=1):
    records.append(
        PolicyRecord(
            policy_id=f'PH-{i:03d}',
            name=f'Holder {i}',
            investment_amount=amount,
            years_in_force=years[i - 1] if years else i,
        ))
  return records


@pytest.fixture
def sample_records() -> list[PolicyRecord]:
  """Three records: one mid, one low, one high investment."""
  return _make_records([120000.0, 75000.0, 200000.0], years=[5, 3, 10])


@pytest.fixture
def sample_store(sample_records) -> PolicyStore:
  """Store pre-loaded with sample_records."""
  return PolicyStore(sample_records)


@pytest.fixture
def empty_store() -> PolicyStore:
  """Store with no records."""
  return PolicyStore()
