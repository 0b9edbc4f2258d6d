"""Tests for shared utilities."""

import pytest
from datetime import datetime, timedelta, timezone

from timeperiod.period.periodexceptions import InvalidDateError
from timeperiod.shared_utils import ensure_aware, load_yaml_file, parse_datetime


class TestEnsureAware:
    """Test tagging naive datetimes"""

    def test_naive_becomes_utc(self):
        result = ensure_aware(datetime(2024, 1, 1, 10, 0))
        assert result.hour == 10
        assert result.utcoffset() == timedelta(0)

    def test_aware_unchanged(self):
        value = datetime(2024, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        assert ensure_aware(value) is value

    def test_custom_default(self):
        minus3 = timezone(timedelta(hours=-3))
        result = ensure_aware(datetime(2024, 1, 1, 10, 0), minus3)
        assert result.utcoffset() == timedelta(hours=-3)


class TestParseDatetime:
    """Test flexible date parsing"""

    def test_plain_string_is_utc(self):
        assert parse_datetime("2020-04-16 17:27") == datetime(2020, 4, 16, 17, 27, tzinfo=timezone.utc)

    def test_offset_kept(self):
        result = parse_datetime("2020-04-16T17:27:00-03:00")
        assert result.utcoffset() == timedelta(hours=-3)

    def test_datetime_passthrough(self):
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert parse_datetime(value) is value

    @pytest.mark.parametrize("value", ["not a date", "", "   ", None, 42])
    def test_invalid(self, value):
        with pytest.raises(InvalidDateError):
            parse_datetime(value)


class TestLoadYamlFile:
    """Test YAML loading"""

    def test_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_locale: es\nphrases:\n  es:\n    hour: [hora, horas]\n", encoding="utf-8")
        data = load_yaml_file(path)
        assert data["default_locale"] == "es"
        assert data["phrases"]["es"]["hour"] == ["hora", "horas"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_file(tmp_path / "missing.yaml")
