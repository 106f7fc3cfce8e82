"""Tests for the format_result dispatcher and OutputSettings."""

import json

from jpdatetime.output.formatters import OutputSettings, format_result
from jpdatetime.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail={"days": 1}),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("new_year", years=1, date="2027-01-01")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "new_year"
        assert data["data"]["date"] == "2027-01-01"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("shift", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        output = format_result(_ok("test", key="val"), json_output=True)
        assert json.loads(output)["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(_ok("test", key="val"), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK")


class TestFormatResultHuman:
    def test_generic_fields(self) -> None:
        output = format_result(_ok("shift", date="2024-03-02", days=1))
        assert output.splitlines()[0].split() == ["OK", "shift"]
        assert "date: 2024-03-02" in output
        assert "days: 1" in output

    def test_booleans_and_null(self) -> None:
        output = format_result(_ok("compare", is_before=True, days_diff=None))
        assert "is_before: true" in output
        assert "days_diff: null" in output

    def test_show_table(self) -> None:
        output = format_result(
            _ok("show", instant="2024-03-05T09:05:30+09:00", date_string="2024-03-05")
        )
        assert "date_string" in output
        assert "2024-03-05" in output
        assert "instant" not in output

    def test_show_table_verbose_includes_instant(self) -> None:
        output = format_result(
            _ok("show", instant="2024-03-05T09:05:30+09:00", date_string="2024-03-05"),
            settings=OutputSettings(verbose=True),
        )
        assert "instant" in output

    def test_slots_listing(self) -> None:
        items = ["2024-03-01 08:00:00", "2024-03-01 08:30:00"]
        output = format_result(_ok("slots", date="2024-03-01", count=2, items=items))
        assert "2024-03-01 08:30:00" in output
        assert "2 slots" in output

    def test_error(self) -> None:
        output = format_result(_err("shift", "Result is outside"))
        assert output.startswith("ERROR")
        assert "Result is outside" in output
        assert "detail" not in output

    def test_error_verbose_detail(self) -> None:
        output = format_result(_err("shift", "x"), settings=OutputSettings(verbose=True))
        assert "days: 1" in output


class TestFormatResultQuiet:
    def test_primary_value(self) -> None:
        output = format_result(
            _ok("show", date_time_string="2024-03-05 09:05:30", date_string="2024-03-05"),
            settings=OutputSettings(quiet=True),
        )
        assert output == "2024-03-05 09:05:30"

    def test_items_one_per_line(self) -> None:
        output = format_result(
            _ok("slots", date="2024-03-01", items=["a", "b"]),
            settings=OutputSettings(quiet=True),
        )
        assert output == "a\nb"

    def test_null_primary_value(self) -> None:
        output = format_result(
            _ok("compare", days_diff=None), settings=OutputSettings(quiet=True)
        )
        assert output == "null"

    def test_unknown_op(self) -> None:
        output = format_result(_ok("other"), settings=OutputSettings(quiet=True))
        assert output == "OK: other"

    def test_error(self) -> None:
        output = format_result(_err("shift", "Bad"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: shift")
