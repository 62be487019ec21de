"""
Password validation rules for the password checker screen.

Password Requirements:
- Minimum 8 characters
- At least one capital letter (A-Z)
- Letters and numbers interleaved: one or more blocks of
  letters, digits, letters covering the whole password

Every check is a pure function of the candidate string. Empty input
never satisfies a rule.
"""

import enum
import string
from typing import Dict, List, Optional, Union

MIN_LENGTH = 8

ASCII_LETTERS = frozenset(string.ascii_letters)
ASCII_DIGITS = frozenset(string.digits)
ASCII_UPPERCASE = frozenset(string.ascii_uppercase)


class Rule(str, enum.Enum):
    LENGTH = "length"
    CAPITAL = "capital"
    NUMBER = "number"


RULE_MESSAGES = {
    Rule.LENGTH: "Must contain at least 8 characters.",
    Rule.CAPITAL: "Must contain at least one capital letter.",
    Rule.NUMBER: (
        "Number inside must separate password in at least two "
        "character letter arrays."
    ),
}


class _ScanState(enum.Enum):
    START = 0
    OPENING_LETTERS = 1
    DIGITS = 2
    LETTERS = 3


def _has_min_length(candidate: str) -> bool:
    return len(candidate) >= MIN_LENGTH


def _has_capital(candidate: str) -> bool:
    return any(char in ASCII_UPPERCASE for char in candidate)


def _is_interleaved(candidate: str) -> bool:
    """
    Check that the whole candidate is one or more ``letters digits letters``
    blocks.

    Scans once, left to right. A letter run between two digit runs closes
    one block and opens the next, so it needs at least two letters.
    """
    state = _ScanState.START
    letter_run = 0

    for char in candidate:
        if char in ASCII_LETTERS:
            if state is _ScanState.START:
                state = _ScanState.OPENING_LETTERS
            elif state is _ScanState.DIGITS:
                state = _ScanState.LETTERS
                letter_run = 1
            elif state is _ScanState.LETTERS:
                letter_run += 1
        elif char in ASCII_DIGITS:
            if state is _ScanState.START:
                return False
            if state is _ScanState.LETTERS and letter_run < 2:
                return False
            state = _ScanState.DIGITS
        else:
            return False

    return state is _ScanState.LETTERS


_RULE_CHECKS = {
    Rule.LENGTH: _has_min_length,
    Rule.CAPITAL: _has_capital,
    Rule.NUMBER: _is_interleaved,
}


def _resolve_rule(rule: Union[Rule, str]) -> Optional[Rule]:
    try:
        return Rule(rule)
    except (ValueError, TypeError):
        return None


def check_rule(candidate: Optional[str], rule: Union[Rule, str]) -> bool:
    """
    Check a single rule against a candidate password.

    Args:
        candidate: The password typed so far, may be empty or None
        rule: A ``Rule`` member or its string value

    Returns:
        True if the rule is satisfied. Empty input and unknown rules
        always give False.

    Examples:
        >>> check_rule("Passw0rd", Rule.NUMBER)
        True
        >>> check_rule("abc123", "number")
        False
    """
    if not candidate:
        return False

    resolved = _resolve_rule(rule)
    if resolved is None:
        return False

    return _RULE_CHECKS[resolved](candidate)


def is_fully_valid(candidate: Optional[str]) -> bool:
    return (
        check_rule(candidate, Rule.LENGTH)
        and check_rule(candidate, Rule.CAPITAL)
        and check_rule(candidate, Rule.NUMBER)
    )


def evaluate_password(candidate: Optional[str]) -> Dict[str, object]:
    """
    Evaluate every rule once.

    Returns:
        Dict with ``rules`` (rule value -> bool) and ``is_valid``, the
        conjunction of all rule results
    """
    rules = {rule.value: check_rule(candidate, rule) for rule in Rule}
    return {"rules": rules, "is_valid": all(rules.values())}


def get_password_requirements() -> List[Dict[str, str]]:
    """
    Get the rules with their display text, in display order.
    """
    return [{"rule": rule.value, "text": RULE_MESSAGES[rule]} for rule in Rule]
