"""Central error types used across the package."""

from __future__ import annotations


class PathPlannerError(RuntimeError):
    """Base error for path planner failures."""


class DataFormatError(PathPlannerError):
    """Raised when an ingested graph document is structurally invalid."""


class HighlightPatternError(PathPlannerError):
    """Raised when a highlight pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"invalid highlight pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class ConfigError(PathPlannerError):
    """Raised when an app configuration file cannot be read or validated."""


__all__ = [
    "PathPlannerError",
    "DataFormatError",
    "HighlightPatternError",
    "ConfigError",
]
