"""
Tri-state filter decision

DENY and ACCEPT are terminal verdicts; NEUTRAL defers to the next filter.
"""

from enum import Enum


class FilterResult(Enum):
    """Outcome of a single filter or of a whole filter chain."""

    DENY = -1
    NEUTRAL = 0
    ACCEPT = 1

    def __str__(self) -> str:
        return self.name

    @property
    def is_terminal(self) -> bool:
        """True if this result ends chain traversal."""
        return self is not FilterResult.NEUTRAL

    @classmethod
    def on_match(cls, accept_on_match: bool) -> "FilterResult":
        """Verdict for a matching event."""
        return cls.ACCEPT if accept_on_match else cls.DENY

    @classmethod
    def on_mismatch(cls, accept_on_match: bool) -> "FilterResult":
        """Opposite verdict, used by filters that classify strictly."""
        return cls.DENY if accept_on_match else cls.ACCEPT
