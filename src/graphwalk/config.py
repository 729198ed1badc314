"""Traversal configuration loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path  # noqa: TC003 - used at runtime
from typing import Any, Literal, cast

from ruamel.yaml import YAML

DFSStrategy = Literal["iterative", "recursive"]

# Default configuration values
DEFAULT_DFS_STRATEGY: DFSStrategy = "iterative"
DFS_STRATEGIES: tuple[DFSStrategy, ...] = ("iterative", "recursive")


class SettingsError(Exception):
    """Raised when traversal settings are invalid or cannot be loaded."""

    def __init__(self, reason: str, path: Path | None = None) -> None:
        self.path = path
        self.reason = reason
        if path is None:
            super().__init__(f"Invalid traversal settings: {reason}")
        else:
            super().__init__(f"Failed to load traversal settings at {path}: {reason}")


@dataclass(frozen=True)
class TraversalSettings:
    """Settings shared by every traversal over a graph.

    Attributes:
        dfs_strategy: How depth-first traversal walks the graph. ``"iterative"``
            keeps an explicit stack and is safe for arbitrarily deep graphs;
            ``"recursive"`` uses the call stack and is bounded by the
            interpreter recursion limit. Both produce identical event order
            and timestamps.
        trace_events: Log every vertex and edge event at DEBUG level.
    """

    dfs_strategy: DFSStrategy = DEFAULT_DFS_STRATEGY
    trace_events: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TraversalSettings:
        """Create settings from a dictionary.

        Args:
            data: Mapping with optional ``dfs_strategy`` and ``trace_events`` keys.

        Returns:
            TraversalSettings instance.

        Raises:
            SettingsError: If a key is unknown or a value has the wrong type.
        """
        unknown = sorted(set(data) - {"dfs_strategy", "trace_events"})
        if unknown:
            raise SettingsError(f"unknown keys: {', '.join(unknown)}")

        strategy = data.get("dfs_strategy", DEFAULT_DFS_STRATEGY)
        if strategy not in DFS_STRATEGIES:
            raise SettingsError(
                f"dfs_strategy must be one of {', '.join(DFS_STRATEGIES)}, got {strategy!r}"
            )

        trace_events = data.get("trace_events", False)
        if not isinstance(trace_events, bool):
            raise SettingsError(f"trace_events must be a boolean, got {trace_events!r}")

        return cls(dfs_strategy=cast("DFSStrategy", strategy), trace_events=trace_events)


def load_settings(config_path: Path) -> TraversalSettings:
    """Load traversal settings from a YAML file.

    The file holds a mapping whose ``traversal`` key contains the settings.
    A file without that key yields default settings.

    Args:
        config_path: Path to the YAML file.

    Returns:
        TraversalSettings instance.

    Raises:
        SettingsError: If the file is missing, unreadable, or invalid.
    """
    if not config_path.exists():
        raise SettingsError("File not found", config_path)

    yaml = YAML(typ="safe")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.load(f)

        if data is None:
            raise SettingsError("Empty file", config_path)
        if not isinstance(data, dict):
            raise SettingsError("Top level must be a mapping", config_path)

        section = data.get("traversal") or {}
        if not isinstance(section, dict):
            raise SettingsError("'traversal' must be a mapping", config_path)

        return TraversalSettings.from_dict(dict(section))
    except Exception as e:
        if isinstance(e, SettingsError):
            if e.path is None:
                raise SettingsError(e.reason, config_path) from e
            raise
        raise SettingsError(str(e), config_path) from e
