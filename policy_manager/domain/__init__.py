"""Domain types and errors for policy management."""

from policy_manager.domain.errors import DuplicateKey
from policy_manager.domain.errors import InvalidArgument
from policy_manager.domain.errors import NotFound
from policy_manager.domain.errors import PolicyManagerError
from policy_manager.domain.types import MaturityResult
from policy_manager.domain.types import PolicyOutput
from policy_manager.domain.types import PolicyRecord

__all__ = [
    'PolicyRecord',
    'PolicyOutput',
    'MaturityResult',
    'PolicyManagerError',
    'InvalidArgument',
    'DuplicateKey',
    'NotFound',
]
