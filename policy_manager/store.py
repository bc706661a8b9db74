'''
In-memory policy store.

PolicyStore is the single owner of the policy records for a session. It
keeps records keyed by policy id in insertion order and enforces id
uniqueness. Listing is records(), named so the class does not shadow the
builtin list. There is no locking: callers that add concurrency must
serialize access themselves.

Usage:
  store = PolicyStore()
  store.insert(PolicyRecord('PH-001', 'Jane Doe', 120000.0, 5))
  record = store.get('PH-001')
  for record in store.records():
    ...
  removed = store.remove('PH-001')
'''

import logging
from collections.abc import Iterable, Iterator

import pandas as pd

from policy_manager.domain.errors import DuplicateKey
from policy_manager.domain.errors import NotFound
from policy_manager.domain.types import PolicyRecord

logger = logging.getLogger(__name__)

COLUMNS = ['policy_id', 'name', 'investment_amount', 'years_in_force']


class PolicyStore:
  '''
  Ordered collection of policy records keyed by policy id.

  Records are listed in the order they were inserted. Removing a record
  and inserting it again moves it to the end.
  '''

  def __init__(self, records: Iterable[PolicyRecord] = ()):
    '''
    Initialize store.

    Args:
      records: Records to insert up front, in order

    Raises:
      DuplicateKey: If two initial records share a policy id
    '''
    self._records: dict[str, PolicyRecord] = {}
    for record in records:
      self.insert(record)

  def insert(self, record: PolicyRecord) -> None:
    '''
    Add a record at the end of the listing order.

    Raises:
      DuplicateKey: If a record with the same policy id is stored; the
        store is left unchanged
    '''
    if record.policy_id in self._records:
      raise DuplicateKey(record.policy_id)
    self._records[record.policy_id] = record
    logger.debug('Inserted policy %s (%d stored)', record.policy_id,
                 len(self._records))

  def get(self, policy_id: str) -> PolicyRecord:
    '''
    Look up a record by policy id.

    Raises:
      NotFound: If no record has this policy id
    '''
    try:
      return self._records[policy_id]
    except KeyError as e:
      raise NotFound(policy_id) from e

  def remove(self, policy_id: str) -> PolicyRecord:
    '''
    Delete a record and return it.

    Raises:
      NotFound: If no record has this policy id; the store is left
        unchanged
    '''
    try:
      record = self._records.pop(policy_id)
    except KeyError as e:
      raise NotFound(policy_id) from e
    logger.debug('Removed policy %s (%d stored)', policy_id,
                 len(self._records))
    return record

  def records(self) -> list[PolicyRecord]:
    '''All records in insertion order, as of this call.'''
    return list(self._records.values())

  def size(self) -> int:
    '''Number of stored records.'''
    return len(self._records)

  def to_frame(self) -> pd.DataFrame:
    '''
    Current records as a DataFrame, one row per record.

    Returns:
      DataFrame with columns policy_id, name, investment_amount and
      years_in_force, in insertion order
    '''
    return pd.DataFrame([r.to_dict() for r in self._records.values()],
                        columns=COLUMNS)

  def __len__(self) -> int:
    return len(self._records)

  def __contains__(self, policy_id: object) -> bool:
    return policy_id in self._records

  def __iter__(self) -> Iterator[PolicyRecord]:
    return iter(self._records.values())
