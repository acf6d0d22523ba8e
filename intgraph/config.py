"""Configuration for engine limits and service constants."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from intgraph.types.base import MAX_WEIGHT, THREE_SUM_TARGET


@dataclass(frozen=True)
class EngineConfig:
    """Limits enforced by the service layer before invoking the engine."""

    # Weights at or above this value mean "no edge"
    max_weight: int = MAX_WEIGHT

    # Sum searched for by the three-sum service
    three_sum_target: int = THREE_SUM_TARGET

    # Largest accepted matrix dimension (n for an n x n matrix)
    max_vertices: int = 256

    # Largest accepted edge count for the bounded-edge search
    max_edge_count: int = 64

    # Largest accepted number of integers in a request
    max_sequence_length: int = 65536

    def __post_init__(self) -> None:
        for name in ("max_weight", "max_vertices", "max_edge_count"):
            if getattr(self, name) <= 0:
                raise ValueError(f"'{name}' must be positive")
        if self.max_sequence_length < 0:
            raise ValueError("'max_sequence_length' must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Build a config from a mapping, rejecting unknown keys.

        Raises:
            ValueError: If a key is unknown or a value is not an integer.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown config keys: {', '.join(unknown)}. "
                f"Valid keys are: {', '.join(sorted(known))}"
            )
        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Config key '{key}' must be an integer")
        return cls(**data)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def load_config(path: Union[str, Path]) -> EngineConfig:
    """Load an `EngineConfig` from a YAML file.

    The file must hold a mapping of config keys; an empty file yields the
    defaults.
    """
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return EngineConfig.from_dict(data)


# Global default configuration instance
DEFAULT_CONFIG = EngineConfig()
