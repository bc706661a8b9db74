'''
In-memory policy holder management with maturity projections.

The package keeps a single ordered store of policy records, projects the
maturity value of an investment at a fixed annual return, and selects the
high-value policies above an investment threshold. The calculations are
pure functions; the rate and threshold come from policies selected by a
serializable configuration.

Usage:
  from policy_manager.domain.types import PolicyRecord
  from policy_manager.engine.maturity import compute_future_value
  from policy_manager.engine.filters import find_high_value
  from policy_manager.store import PolicyStore

  store = PolicyStore()
  store.insert(PolicyRecord('PH-001', 'Jane Doe', 120000.0, 5))
  value = compute_future_value(120000.0, 5)
  high = find_high_value(store.records(), 100000.0)
'''
