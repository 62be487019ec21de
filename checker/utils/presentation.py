"""
Maps rule results to what the screen shows.

The validator only answers True/False. Before anything is typed the screen
shows every line and the input border in a neutral colour instead of red.
"""

import enum
from typing import Dict, Optional

from .password_validator import RULE_MESSAGES, Rule, evaluate_password


class Status(str, enum.Enum):
    NEUTRAL = "neutral"
    VALID = "valid"
    INVALID = "invalid"


STATUS_COLORS = {
    Status.NEUTRAL: "#000",
    Status.VALID: "green",
    Status.INVALID: "red",
}


def status_for(candidate: Optional[str], passed: bool) -> Status:
    if not candidate:
        return Status.NEUTRAL
    return Status.VALID if passed else Status.INVALID


def build_checklist(candidate: Optional[str]) -> Dict[str, object]:
    """
    Build everything the screen needs for one input value.

    Args:
        candidate: Current text field value

    Returns:
        Dict with the aggregate ``is_valid`` and ``status`` (input border)
        and one item per rule (status lines), in display order
    """
    result = evaluate_password(candidate)
    items = []
    for rule in Rule:
        passed = result["rules"][rule.value]
        items.append(
            {
                "rule": rule.value,
                "text": RULE_MESSAGES[rule],
                "is_valid": passed,
                "status": status_for(candidate, passed).value,
            }
        )

    return {
        "is_valid": result["is_valid"],
        "status": status_for(candidate, result["is_valid"]).value,
        "items": items,
    }
