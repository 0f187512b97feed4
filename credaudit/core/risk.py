"""
Risk levels shared by the strength analyzer and the credential auditor.

Path: credaudit/core/risk.py

Ordered from most to least severe:
    CRITICAL > HIGH > MEDIUM > LOW > INFO
"""

from enum import Enum


class RiskLevel(Enum):
    """Closed set of risk classifications with a total severity order."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def severity(self) -> int:
        """Integer rank, higher is more severe."""
        return _SEVERITY[self]

    @property
    def label(self) -> str:
        """Canonical uppercase label used in reports."""
        return self.name

    @property
    def color(self) -> str:
        """Terminal style name for this level."""
        return _COLORS[self]

    @property
    def sort_key(self) -> int:
        """Key for sorting most severe first."""
        return -self.severity

    def __lt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.severity >= other.severity

    @classmethod
    def from_score(cls, score: int) -> "RiskLevel":
        """
        Classify a strength score.

        Thresholds are checked in ascending order and the first match wins.

        Args:
            score: Strength score (may be negative).

        Returns:
            RiskLevel for the score.
        """
        for threshold, level in SCORE_THRESHOLDS:
            if score <= threshold:
                return level
        return cls.INFO

    @classmethod
    def parse(cls, text: str) -> "RiskLevel":
        """
        Parse a level name, case-insensitive.

        Raises:
            ValueError: If text is not a known level.
        """
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            valid = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown risk level '{text}' (expected one of: {valid})")


_SEVERITY = {
    RiskLevel.CRITICAL: 4,
    RiskLevel.HIGH: 3,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 1,
    RiskLevel.INFO: 0,
}

_COLORS = {
    RiskLevel.CRITICAL: "bold red",
    RiskLevel.HIGH: "red",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.LOW: "cyan",
    RiskLevel.INFO: "green",
}

# (max score, level) pairs, ascending
SCORE_THRESHOLDS = (
    (1, RiskLevel.CRITICAL),
    (3, RiskLevel.HIGH),
    (5, RiskLevel.MEDIUM),
    (7, RiskLevel.LOW),
)
