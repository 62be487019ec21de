import pytest

from checker.utils.presentation import (
    STATUS_COLORS,
    Status,
    build_checklist,
    status_for,
)


class TestStatusFor:
    """Test status mapping"""

    @pytest.mark.parametrize("passed", [True, False])
    def test_empty_input_is_neutral(self, passed):
        """Test neutral status before input"""
        assert status_for("", passed) is Status.NEUTRAL
        assert status_for(None, passed) is Status.NEUTRAL

    def test_non_empty_input(self):
        """Test valid and invalid status"""
        assert status_for("a", True) is Status.VALID
        assert status_for("a", False) is Status.INVALID

    def test_colors(self):
        """Test status colours"""
        assert STATUS_COLORS[Status.NEUTRAL] == "#000"
        assert STATUS_COLORS[Status.VALID] == "green"
        assert STATUS_COLORS[Status.INVALID] == "red"


class TestBuildChecklist:
    """Test the screen checklist"""

    def test_empty_candidate(self):
        """Test checklist for empty input"""
        checklist = build_checklist("")
        assert checklist["is_valid"] is False
        assert checklist["status"] == "neutral"
        assert [item["status"] for item in checklist["items"]] == ["neutral"] * 3
        assert [item["is_valid"] for item in checklist["items"]] == [False] * 3

    def test_valid_candidate(self):
        """Test checklist for a valid password"""
        checklist = build_checklist("Passw0rd")
        assert checklist["is_valid"] is True
        assert checklist["status"] == "valid"
        assert all(item["status"] == "valid" for item in checklist["items"])

    def test_mixed_candidate(self):
        """Test checklist with mixed results"""
        checklist = build_checklist("password")
        assert checklist["status"] == "invalid"
        statuses = {item["rule"]: item["status"] for item in checklist["items"]}
        assert statuses == {
            "length": "valid",
            "capital": "invalid",
            "number": "invalid",
        }

    def test_items_carry_display_text(self):
        """Test item display text"""
        checklist = build_checklist("x")
        assert checklist["items"][1]["text"] == (
            "Must contain at least one capital letter."
        )
