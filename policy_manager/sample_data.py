"""Sample policy holders for demonstrating the console."""

from policy_manager.domain.types import PolicyRecord
from policy_manager.store import PolicyStore

SAMPLE_RECORDS = (
    PolicyRecord('PH-001', 'ashhar kaunain khan', 120000.0, 5),
    PolicyRecord('PH-002', 'rahul kumar', 75000.0, 3),
    PolicyRecord('PH-003', 'ajay Kumar', 200000.0, 10),
)


def seed_sample_data(store: PolicyStore) -> int:
  """
  Insert the sample records that are not already stored.

  Returns:
    Number of records inserted
  """
  inserted = 0
  for record in SAMPLE_RECORDS:
    if record.policy_id in store:
      continue
    store.insert(record)
    inserted += 1
  return inserted
