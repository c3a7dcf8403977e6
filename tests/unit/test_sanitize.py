# tests/unit/test_sanitize.py
"""Tests for input sanitization helpers."""

import pytest

from automation_advisor.errors import PlanValidationError
from automation_advisor.validation.sanitize import (
    sanitize_description,
    resolve_export_dir,
    sanitize_plan_id,
)


class TestSanitizeDescription:
    def test_strips_whitespace(self):
        assert sanitize_description("  Tienda online \n") == "Tienda online"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
    def test_blank_rejected(self, text):
        with pytest.raises(PlanValidationError, match="empty"):
            sanitize_description(text)

    def test_truncates_long_text(self):
        assert sanitize_description("x" * 20, max_length=10) == "x" * 10


class TestSanitizePlanId:
    def test_full_uuid_lowercased(self):
        plan_id = "0123ABCD-FFFF-4000-8000-000000000000"
        assert sanitize_plan_id(plan_id) == plan_id.lower()

    def test_prefix_accepted(self):
        assert sanitize_plan_id(" 0123abcd ") == "0123abcd"

    @pytest.mark.parametrize("plan_id", ["", "abc", "../etc", "zzzzzzzz", "a" * 37])
    def test_invalid_rejected(self, plan_id):
        with pytest.raises(PlanValidationError):
            sanitize_plan_id(plan_id)


class TestResolveExportDir:
    def test_existing_dir(self, tmp_path):
        assert resolve_export_dir(str(tmp_path)) == tmp_path.resolve()

    def test_missing_dir(self, tmp_path):
        with pytest.raises(PlanValidationError, match="does not exist"):
            resolve_export_dir(str(tmp_path / "missing"))

    def test_file_is_not_dir(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(PlanValidationError, match="not a directory"):
            resolve_export_dir(str(target))

    def test_existing_export_file_left_untouched(self, tmp_path):
        target = tmp_path / "Plan_Automatizacion_0123abcd.txt"
        target.write_text("previous export", encoding="utf-8")
        with pytest.raises(PlanValidationError, match="is a file"):
            resolve_export_dir(str(target))
        assert target.read_text(encoding="utf-8") == "previous export"
