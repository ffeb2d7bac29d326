"""
Results of the recursive operations.
"""

from dataclasses import dataclass, field


@dataclass
class RemovalReport:
    """Outcome of a recursive removal: every visited path and the ones left behind."""

    visited: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.skipped


@dataclass
class SearchReport:
    """Outcome of a recursive search."""

    matches: list[str] = field(default_factory=list)
    scanned: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
