import pytest

from credaudit.core.risk import RiskLevel
from credaudit.core.strength import (
    KEYBOARD_SEQUENCES,
    WEAK_PATTERNS,
    StrengthAnalyzer,
    analyze_password,
    find_keyboard_sequence,
    find_weak_pattern,
)


class TestScenarios:
    def test_password123_is_critical(self):
        result = analyze_password("password123")

        assert result.score == 1
        assert result.risk is RiskLevel.CRITICAL
        assert result.issues == (
            "missing uppercase letters",
            "missing special characters",
            "contains common weak pattern: 'password'",
        )
        assert result.suggestions == (
            "add uppercase letters",
            "add special characters (!@#$%^&*)",
            "avoid common words and patterns",
        )

    def test_strong_password_is_low(self):
        result = analyze_password("X9#mK2$pL7@nQ4")

        assert result.score == 7
        assert result.risk is RiskLevel.LOW
        assert result.issues == ()
        assert result.suggestions == ()

    def test_empty_password(self):
        result = analyze_password("")

        assert result.score == 0
        assert result.risk is RiskLevel.CRITICAL
        assert len(result.issues) == 5
        assert result.issues[0].startswith("password too short")
        assert result.suggestions[0] == "use at least 12 characters"
        assert len(result.suggestions) == 5


class TestLengthRule:
    def test_short_password_gets_no_length_points(self):
        # 7 chars, lower only
        assert analyze_password("zyxwvut").score == 1

    def test_medium_length(self):
        assert analyze_password("zyxwvuts").score == 2

    def test_long_length(self):
        assert analyze_password("zyxwvutsrqpo").score == 3

    def test_length_counts_utf8_bytes(self):
        # 4 characters, 8 bytes
        result = analyze_password("éééé")
        assert not any("too short" in issue for issue in result.issues)

    def test_short_issue_reports_bytes(self):
        result = analyze_password("ééé")
        assert result.issues[0] == "password too short (6 bytes)"


class TestCharacterClasses:
    def test_non_ascii_counts_as_special(self):
        result = analyze_password("horsebatté")
        assert "missing special characters" not in result.issues

    @pytest.mark.parametrize("addition", ["7", "H", "!"])
    def test_adding_a_class_never_lowers_score(self, addition):
        base = analyze_password("horsebattery")
        extended = analyze_password("horsebattery" + addition)
        assert extended.score > base.score

    def test_special_is_worth_two(self):
        assert analyze_password("horsebattery!").score - analyze_password("horsebatteryx").score == 2


class TestWeakPatterns:
    def test_case_insensitive(self):
        result = analyze_password("PASSWORD")
        assert "contains common weak pattern: 'password'" in result.issues
        assert result.score == 0

    def test_first_match_in_list_order_wins(self):
        # "qwerty" precedes "admin" in the list
        result = analyze_password("adminqwerty")

        weak = [i for i in result.issues if "common weak pattern" in i]
        assert weak == ["contains common weak pattern: 'qwerty'"]
        assert result.suggestions.count("avoid common words and patterns") == 1
        assert result.score == 0

    def test_penalty_applied_once(self):
        with_two = analyze_password("Zz9!password123456")
        assert find_weak_pattern("Zz9!password123456") == "password"
        # 2 length + 4 classes (1+1+1+2) - 2
        assert with_two.score == 5

    def test_list_order_is_preserved(self):
        assert WEAK_PATTERNS[:3] == ("password", "123456", "qwerty")
        assert WEAK_PATTERNS[-1] == "sunshine"
        assert len(WEAK_PATTERNS) == 15


class TestKeyboardSequences:
    def test_reversed_sequence(self):
        result = analyze_password("87654321")

        assert "contains keyboard sequence" in result.issues
        assert result.score == 1
        assert result.risk is RiskLevel.CRITICAL

    def test_sequence_and_weak_pattern_stack(self):
        result = analyze_password("qwertyui")

        assert result.score == -1
        assert result.risk is RiskLevel.CRITICAL
        assert result.issues[-2:] == (
            "contains common weak pattern: 'qwerty'",
            "contains keyboard sequence",
        )

    def test_first_sequence_only(self):
        assert find_keyboard_sequence("ABCDEFGH-12345678") == "abcdefgh"
        result = analyze_password("ABCDEFGH-12345678")
        assert result.issues.count("contains keyboard sequence") == 1

    def test_no_sequence(self):
        assert find_keyboard_sequence("X9#mK2$pL7@nQ4") is None

    def test_list_order_is_preserved(self):
        assert KEYBOARD_SEQUENCES == ("abcdefgh", "12345678", "qwertyui", "asdfghjk", "zxcvbnm")


class TestDeterminism:
    @pytest.mark.parametrize("password", ["", "password123", "X9#mK2$pL7@nQ4", "qwertyui", "é"])
    def test_same_input_same_result(self, password):
        assert analyze_password(password) == analyze_password(password)

    def test_analyzer_object_matches_function(self):
        assert StrengthAnalyzer().analyze("Welcome2024") == analyze_password("Welcome2024")

    def test_result_is_immutable(self):
        result = analyze_password("abc")
        with pytest.raises(AttributeError):
            result.score = 10

    def test_to_dict(self):
        data = analyze_password("Welcome2024").to_dict()
        assert data["score"] == 2
        assert data["risk"] == "high"
        assert data["issues"] == [
            "missing special characters",
            "contains common weak pattern: 'welcome'",
        ]
