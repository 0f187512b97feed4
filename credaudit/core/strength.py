"""
Password strength analyzer.

Path: credaudit/core/strength.py

Rule-based, deterministic scoring. Each rule adds to (or subtracts from)
an integer score and may append an issue/suggestion pair; the final
score is classified with RiskLevel.from_score().

Usage:
    from credaudit.core.strength import analyze_password

    result = analyze_password("X9#mK2$pL7@nQ4")
    print(result.score, result.risk.label)   # 7 LOW
    for issue in result.issues:
        print(f"  - {issue}")
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from credaudit.core.risk import RiskLevel

logger = logging.getLogger(__name__)


MIN_LENGTH = 8
RECOMMENDED_LENGTH = 12

# Order matters: only the first match is reported.
WEAK_PATTERNS: Tuple[str, ...] = (
    "password",
    "123456",
    "qwerty",
    "admin",
    "letmein",
    "welcome",
    "monkey",
    "dragon",
    "master",
    "login",
    "abc123",
    "111111",
    "passw0rd",
    "trustno1",
    "sunshine",
)

# Matched forwards and reversed, first match only.
KEYBOARD_SEQUENCES: Tuple[str, ...] = (
    "abcdefgh",
    "12345678",
    "qwertyui",
    "asdfghjk",
    "zxcvbnm",
)


@dataclass(frozen=True)
class StrengthResult:
    """Outcome of analyzing a single password."""
    score: int
    risk: RiskLevel
    issues: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()

    @property
    def is_weak(self) -> bool:
        """True when the password rates critical or high."""
        return self.risk in (RiskLevel.CRITICAL, RiskLevel.HIGH)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "risk": self.risk.value,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_special(ch: str) -> bool:
    return not (_is_upper(ch) or _is_lower(ch) or _is_digit(ch))


def find_weak_pattern(password: str) -> Optional[str]:
    """Return the first weak pattern contained in password, if any."""
    lowered = password.lower()
    for pattern in WEAK_PATTERNS:
        if pattern in lowered:
            return pattern
    return None


def find_keyboard_sequence(password: str) -> Optional[str]:
    """Return the first keyboard run contained in password (either direction)."""
    lowered = password.lower()
    for sequence in KEYBOARD_SEQUENCES:
        if sequence in lowered or sequence[::-1] in lowered:
            return sequence
    return None


def analyze_password(password: str) -> StrengthResult:
    """
    Score a password and classify its risk.

    Never raises; every string (including "") maps to a result.

    Args:
        password: Plaintext password.

    Returns:
        StrengthResult with score, risk, issues and suggestions in
        rule-evaluation order.
    """
    score = 0
    issues: List[str] = []
    suggestions: List[str] = []

    # Length is measured over the UTF-8 encoding
    length = len(password.encode("utf-8"))
    if length < MIN_LENGTH:
        issues.append(f"password too short ({length} bytes)")
        suggestions.append(f"use at least {RECOMMENDED_LENGTH} characters")
    elif length >= RECOMMENDED_LENGTH:
        score += 2
    else:
        score += 1

    if any(_is_upper(ch) for ch in password):
        score += 1
    else:
        issues.append("missing uppercase letters")
        suggestions.append("add uppercase letters")

    if any(_is_lower(ch) for ch in password):
        score += 1
    else:
        issues.append("missing lowercase letters")
        suggestions.append("add lowercase letters")

    if any(_is_digit(ch) for ch in password):
        score += 1
    else:
        issues.append("missing digits")
        suggestions.append("add digits")

    if any(_is_special(ch) for ch in password):
        score += 2
    else:
        issues.append("missing special characters")
        suggestions.append("add special characters (!@#$%^&*)")

    pattern = find_weak_pattern(password)
    if pattern is not None:
        score -= 2
        issues.append(f"contains common weak pattern: '{pattern}'")
        suggestions.append("avoid common words and patterns")
        logger.debug(f"Weak pattern rule matched '{pattern}'")

    sequence = find_keyboard_sequence(password)
    if sequence is not None:
        score -= 1
        issues.append("contains keyboard sequence")
        suggestions.append("avoid keyboard sequences")
        logger.debug(f"Keyboard sequence rule matched '{sequence}'")

    return StrengthResult(
        score=score,
        risk=RiskLevel.from_score(score),
        issues=tuple(issues),
        suggestions=tuple(suggestions),
    )


class StrengthAnalyzer:
    """
    Object wrapper around analyze_password().

    Usage:
        analyzer = StrengthAnalyzer()
        result = analyzer.analyze("hunter2")
    """

    def analyze(self, password: str) -> StrengthResult:
        """Analyze a single password."""
        return analyze_password(password)
