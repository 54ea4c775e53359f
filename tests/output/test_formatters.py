"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest
from pydantic import ValidationError

from xstypes.output.formatters import OutputSettings, format_result
from xstypes.services.result import ServiceError, ServiceResult
from xstypes.services.typecheck import TypeCheckService


def _ok(op: str = "check", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "check", msg: str = "fail", **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="OUT_OF_RANGE", message=msg, detail=dict(detail)),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        settings = OutputSettings()
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            OutputSettings().quiet = True  # type: ignore[misc]


class TestFormatResultJSON:
    def test_success(self) -> None:
        output = format_result(_ok(value="---07"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "check"
        assert data["data"]["value"] == "---07"

    def test_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), json_output=True))
        assert data["ok"] is False
        assert data["error"]["code"] == "OUT_OF_RANGE"
        assert data["error"]["message"] == "Bad"

    def test_settings_override_kwarg(self) -> None:
        output = format_result(_ok(value="x"), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK")


class TestFormatResultHuman:
    def test_success_lines(self) -> None:
        output = format_result(_ok(type="gDay", value="---07", coerced=True))
        assert output.splitlines() == [
            "OK: check",
            "  type: 'gDay'",
            "  value: '---07'",
            "  coerced: True",
        ]

    def test_text_values_are_quoted(self) -> None:
        output = format_result(_ok(value="aGVsbG8=\n"))
        assert "  value: 'aGVsbG8=\\n'" in output

    def test_list_values_as_json(self) -> None:
        output = format_result(_ok("describe", sources=["integer", "date"]))
        assert '  sources: ["integer","date"]' in output

    def test_error_line(self) -> None:
        output = format_result(_err(msg="200 is out of range for byte"))
        assert output == "ERROR: check [OUT_OF_RANGE]: 200 is out of range for byte"

    def test_error_detail_only_when_verbose(self) -> None:
        result = _err(msg="bad", min=-128, max=127)
        assert "min" not in format_result(result)
        verbose = format_result(result, settings=OutputSettings(verbose=True))
        assert "  min: -128" in verbose
        assert "  max: 127" in verbose

    def test_markup_in_message_is_escaped(self) -> None:
        output = format_result(_err(msg="'[bold]x' is not a valid gDay"))
        assert "[bold]x" in output

    def test_quiet_prints_bare_value(self) -> None:
        output = format_result(_ok(value="--11"), settings=OutputSettings(quiet=True))
        assert output == "--11"

    def test_long_integer_result(self, service: TypeCheckService) -> None:
        result = service.check("integer", "7" * 5000)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "7" * 5000
        assert json.loads(format_result(result, settings=OutputSettings(json_output=True)))["ok"]

    def test_quiet_without_value(self) -> None:
        output = format_result(_ok("describe", type="byte"), settings=OutputSettings(quiet=True))
        assert output.startswith("OK: describe")

    def test_types_table(self, service: TypeCheckService) -> None:
        output = format_result(service.list_types())
        assert output.startswith("OK: list_types")
        assert "unsignedLong" in output
        assert "XsGMonthDay" in output
        assert "int_pair, datetime, date" in output
        assert output.rstrip().endswith("count: 29")
