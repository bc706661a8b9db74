"""
Configuration for a policy manager session.

ManagerConfig is a serializable (JSON-friendly) configuration class that
names the policies used for maturity projection and high-value screening.
"""

from dataclasses import asdict
from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any


@dataclass
class ManagerConfig:
  """
  Configuration for a policy manager session.

  Policy fields are strings that map to factories in the registry, which
  keeps the config serializable for reproducibility.

  Attributes:
    name: Human-readable configuration name
    rate: Annual return policy name (e.g., 'fixed_0p08')
    threshold: High-value threshold policy name (e.g., 'fixed_100k')
    seed_sample_data: Whether the console starts with sample records
  """
  name: str = 'default'
  rate: str = 'fixed_0p08'
  threshold: str = 'fixed_100k'
  seed_sample_data: bool = True

  @classmethod
  def default(cls) -> 'ManagerConfig':
    """
    Create default configuration.

    Uses:
      - Fixed 8% annual return
      - 100,000 high-value threshold
      - Sample records loaded at start
    """
    return cls(
        name='default',
        rate='fixed_0p08',
        threshold='fixed_100k',
        seed_sample_data=True,
    )

  @classmethod
  def empty(cls) -> 'ManagerConfig':
    """Default policies with an empty store at start."""
    return cls(
        name='empty',
        rate='fixed_0p08',
        threshold='fixed_100k',
        seed_sample_data=False,
    )

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ManagerConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ManagerConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def load(cls, path: Path) -> 'ManagerConfig':
    """Read a configuration from a JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
      return cls.from_json(f.read())
