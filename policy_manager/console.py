'''
Interactive policy holder management console.

This module drives a PolicyStore from a text menu. It:
1. Prompts for and validates raw input (ids, names, amounts, years)
2. Calls the store, the maturity engine and the high-value filter
3. Reports results and recoverable errors, then shows the menu again

Usage:
  python -m policy_manager.console
  python -m policy_manager.console --no-seed -v
  python -m policy_manager.console --config my_config.json
'''

import argparse
import logging
import math
import uuid
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Optional

from policy_manager.domain.errors import NotFound
from policy_manager.domain.errors import PolicyManagerError
from policy_manager.domain.types import MaturityResult
from policy_manager.domain.types import PolicyRecord
from policy_manager.engine.filters import find_high_value
from policy_manager.engine.maturity import compute_future_value
from policy_manager.sample_data import seed_sample_data
from policy_manager.scenarios.config import ManagerConfig
from policy_manager.scenarios.registry import create_policies
from policy_manager.store import PolicyStore

logger = logging.getLogger(__name__)

SEPARATOR = '-' * 49

MENU = (
    '\nMenu:\n'
    '  1) Add a Policy Holder\n'
    '  2) List all Policy Holders\n'
    '  3) Calculate maturity value for a policy\n'
    '  4) Find high-value policies (investmentAmount > {threshold})\n'
    '  5) Remove a policy by policyId\n'
    '  6) Exit')


def format_currency(amount: Optional[float]) -> str:
  '''Format an amount as dollars with thousands separators.'''
  if amount is None or (isinstance(amount, float) and math.isnan(amount)):
    return 'n/a'
  if math.isinf(amount):
    return 'out of range'
  return f'${amount:,.2f}'


class PolicyConsole:
  '''
  Menu-driven front end for a PolicyStore.

  All output goes through the module logger; input comes from input_fn
  so the console can be driven by a script or a test.
  '''

  def __init__(
      self,
      store: PolicyStore,
      config: Optional[ManagerConfig] = None,
      input_fn: Optional[Callable[[str], str]] = None,
  ):
    '''
    Initialize console.

    Args:
      store: Store the console reads and mutates
      config: ManagerConfig (default: ManagerConfig.default())
      input_fn: Reads one line given a prompt (default: builtin input)
    '''
    if config is None:
      config = ManagerConfig.default()

    self.store = store
    self.config = config
    self.input_fn = input_fn if input_fn is not None else input

    policies = create_policies(config)
    self.rate_policy = policies['rate']
    self.threshold_policy = policies['threshold']

  def run(self) -> None:
    '''Show the menu until the user exits or input ends.'''
    logger.info('=' * 39)
    logger.info('   Policy Holder Management Console')
    logger.info('=' * 39)

    running = True
    while running:
      threshold = self.threshold_policy.compute().value
      logger.info(MENU.format(threshold=f'{threshold:,.0f}'))
      try:
        choice = self._prompt('Enter choice')
      except EOFError:
        logger.info('Input closed. Goodbye!')
        break
      running = self.handle(choice)

  def handle(self, choice: str) -> bool:
    '''
    Run one menu action.

    Recoverable errors are reported and the console keeps going.

    Returns:
      False when the user chose to exit, True otherwise
    '''
    actions = {
        '1': self.add_policy,
        '2': self.list_policies,
        '3': self.calculate_maturity,
        '4': self.find_high_value_policies,
        '5': self.remove_policy,
    }

    choice = choice.strip()
    if choice == '6':
      logger.info('Exiting. Goodbye!')
      return False

    action = actions.get(choice)
    if action is None:
      logger.info('Invalid choice. Try again.')
      return True

    try:
      action()
    except EOFError:
      logger.info('Input closed. Goodbye!')
      return False
    except PolicyManagerError as e:
      logger.warning('%s', e)
    return True

  def add_policy(self) -> Optional[PolicyRecord]:
    '''Prompt for a new record and insert it.'''
    logger.info('\nAdd Policy Holder (enter values). '
                'Leave policyId blank to auto-generate.')
    policy_id = self._prompt('policyId').strip()
    if not policy_id:
      policy_id = str(uuid.uuid4())
      logger.info('Generated policyId -> %s', policy_id)
    elif policy_id in self.store:
      logger.info('A policy with this ID already exists. Aborting add.')
      return None

    name = self._prompt('name').strip()
    if not name:
      logger.info('Name cannot be empty. Aborting.')
      return None

    amount = self._read_float('investmentAmount (e.g., 150000)')
    if amount is None or amount < 0:
      logger.info('Invalid investment amount. Aborting.')
      return None

    years = self._read_int('yearsInForce (integer)')
    if years is None or years < 0:
      logger.info('Invalid yearsInForce. Aborting.')
      return None

    record = PolicyRecord(policy_id, name, amount, years)
    self.store.insert(record)
    logger.info('Policy added successfully:')
    self._log_records([record])
    return record

  def list_policies(self) -> None:
    '''Show every stored record.'''
    logger.info('\nStored Policy Holders (%d):', self.store.size())
    records = self.store.records()
    if not records:
      logger.info('  (none)')
      return
    self._log_records(records)

  def calculate_maturity(self) -> Optional[MaturityResult]:
    '''Project maturity value for a stored policy or ad-hoc values.'''
    policy_id = self._prompt(
        '\nEnter policyId to calculate maturity for '
        '(or leave blank to provide custom values)').strip()

    if not policy_id:
      principal = self._read_float('Investment amount')
      if principal is None or principal < 0:
        logger.info('Invalid investment amount. Aborting.')
        return None
      years = self._read_int('Years in force')
      if years is None or years < 0:
        logger.info('Invalid years. Aborting.')
        return None
      result = self.project_maturity(principal, years)
    else:
      record = self.store.get(policy_id)
      if not record.has_investment_amount:
        logger.info('Policy %s has no investment amount. Aborting.',
                    record.policy_id)
        return None
      logger.info('Using values from policy: %s (%s)', record.policy_id,
                  record.name)
      result = self.project_maturity(record.investment_amount,
                                     record.years_in_force,
                                     policy_id=record.policy_id)

    logger.info('\nMaturity Calculation:')
    logger.info('  Principal: %s', format_currency(result.principal))
    logger.info('  Years    : %d', result.years)
    logger.info('  Annual Return Assumed: %s%% (%s)',
                f'{result.annual_rate * 100:g}',
                result.diag.get('rate_method', 'fixed'))
    logger.info('  Future Value: %s', format_currency(result.future_value))
    logger.info('  Growth      : %s', format_currency(result.growth))
    return result

  def project_maturity(
      self,
      principal: float,
      years: int,
      policy_id: Optional[str] = None,
  ) -> MaturityResult:
    '''
    Compute maturity value with the configured rate policy.

    Raises:
      InvalidArgument: If principal or years is negative
    '''
    rate_result = self.rate_policy.compute()
    future_value = compute_future_value(principal, years, rate_result.value)
    return MaturityResult(
        principal=principal,
        years=years,
        annual_rate=rate_result.value,
        future_value=future_value,
        policy_id=policy_id,
        diag=rate_result.diag,
    )

  def high_value_records(self) -> list[PolicyRecord]:
    '''Stored records above the configured threshold.'''
    threshold = self.threshold_policy.compute().value
    return find_high_value(self.store.records(), threshold)

  def find_high_value_policies(self) -> list[PolicyRecord]:
    '''Show stored records above the configured threshold.'''
    if self.store.size() == 0:
      logger.info('\nNo policy holders available.')
      return []

    threshold = self.threshold_policy.compute().value
    logger.info('\nHigh-value policy holders (investmentAmount > %s):',
                f'{threshold:,.0f}')
    found = self.high_value_records()
    if not found:
      logger.info('  (none)')
    else:
      self._log_records(found)
    return found

  def remove_policy(self) -> Optional[PolicyRecord]:
    '''Prompt for a policy id and remove it.'''
    policy_id = self._prompt('\nEnter policyId to remove').strip()
    if not policy_id:
      logger.info('policyId required.')
      return None
    try:
      removed = self.store.remove(policy_id)
    except NotFound:
      logger.info('No policy with id: %s', policy_id)
      return None
    logger.info('Removed policy: %s (%s)', removed.policy_id, removed.name)
    return removed

  def _prompt(self, label: str) -> str:
    return self.input_fn(f'{label}: ')

  def _read_float(self, label: str) -> Optional[float]:
    '''Read a finite number, or None after reporting bad input.'''
    raw = self._prompt(label)
    try:
      value = float(raw.strip())
    except ValueError:
      logger.info('Invalid number: %s', raw)
      return None
    if not math.isfinite(value):
      logger.info('Invalid number: %s', raw)
      return None
    return value

  def _read_int(self, label: str) -> Optional[int]:
    '''Read an integer, or None after reporting bad input.'''
    raw = self._prompt(label)
    try:
      return int(raw.strip())
    except ValueError:
      logger.info('Invalid integer: %s', raw)
      return None

  def _log_records(self, records: Sequence[PolicyRecord]) -> None:
    for record in records:
      logger.info(SEPARATOR)
      logger.info('policyId       : %s', record.policy_id)
      logger.info('name           : %s', record.name)
      logger.info('investmentAmt  : %s',
                  format_currency(record.investment_amount))
      logger.info('yearsInForce   : %d', record.years_in_force)
    logger.info(SEPARATOR)


def build_store(config: ManagerConfig) -> PolicyStore:
  '''Create the session store, seeded when the config asks for it.'''
  store = PolicyStore()
  if config.seed_sample_data:
    inserted = seed_sample_data(store)
    logger.debug('Seeded %d sample policies', inserted)
  return store


def main(argv: Optional[Sequence[str]] = None) -> int:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(
      description='Interactive policy holder management console',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__,
  )
  parser.add_argument('--config',
                      type=Path,
                      default=None,
                      help='JSON file with a ManagerConfig')
  parser.add_argument('--no-seed',
                      action='store_true',
                      help='Start with an empty store')
  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args(argv)

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(message)s',
  )

  if args.config is not None:
    try:
      config = ManagerConfig.load(args.config)
    except (OSError, TypeError, ValueError) as e:
      parser.error(f'cannot load config {args.config}: {e}')
  else:
    config = ManagerConfig.default()
  if args.no_seed:
    config.seed_sample_data = False

  logger.debug('Using config:\n%s', config.to_json())

  try:
    console = PolicyConsole(build_store(config), config)
  except KeyError as e:
    parser.error(f'invalid config {args.config}: {e.args[0]}')
  console.run()
  return 0


if __name__ == '__main__':
  raise SystemExit(main())
