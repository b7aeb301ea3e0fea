"""Tests for op-specific Rich renderers."""

from vetted.output.renderers import render_quiet, render_result
from vetted.services.result import ServiceError, ServiceResult


class TestPersonRenderer:
    def test_success(self) -> None:
        result = ServiceResult(
            ok=True, op="validate_person", data={"person": {"name": "Peter Parker", "age": 25}}
        )
        output = render_result(result)
        assert "OK" in output
        assert "validate_person" in output
        assert "name: Peter Parker" in output
        assert "age: 25" in output

    def test_failure_lists_every_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="validate_person",
            error=ServiceError(
                code="VALIDATION_FAILED",
                message="NameLengthOutOfRange; AgeOutOfRange",
                detail={"errors": ["NameLengthOutOfRange", "AgeOutOfRange"]},
            ),
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "- NameLengthOutOfRange" in output
        assert "- AgeOutOfRange" in output
        assert output.index("- NameLengthOutOfRange") < output.index("- AgeOutOfRange")

    def test_markup_in_values_is_literal(self) -> None:
        result = ServiceResult(
            ok=True, op="validate_person", data={"person": {"name": "[bold]x[/bold]", "age": 1}}
        )
        assert "[bold]x[/bold]" in render_result(result)


class TestBatchRenderer:
    def _result(self) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op="validate_batch",
            data={
                "valid": [{"index": 0, "person": {"name": "Peter Parker", "age": 25}}],
                "invalid": [{"index": 1, "errors": ["NameLengthOutOfRange", "AgeOutOfRange"]}],
            },
            error=ServiceError(code="BATCH_PARTIAL", message="1 of 2 items failed"),
            meta={"total": 2, "valid": 1, "invalid": 1},
        )

    def test_partial_failure_shows_table(self) -> None:
        output = render_result(self._result())
        assert "1 of 2 items failed" in output
        assert "valid" in output
        assert "NameLengthOutOfRange, AgeOutOfRange" in output
        assert "Peter Parker" in output

    def test_verbose_shows_meta(self) -> None:
        output = render_result(self._result(), verbose=True)
        assert "meta:" in output
        assert "total: 2" in output

    def test_all_valid(self) -> None:
        result = ServiceResult(
            ok=True,
            op="validate_batch",
            data={"valid": [{"index": 0, "person": {"name": "A", "age": 1}}], "invalid": []},
        )
        output = render_result(result)
        assert output.startswith("OK")
        assert "valid" in output


class TestRulesRenderer:
    def test_rules_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="rules",
            data={
                "rules": [
                    {
                        "kind": "length",
                        "name": "name",
                        "min_length": 1,
                        "max_length": 50,
                        "error": "NameLengthOutOfRange",
                    },
                    {
                        "kind": "range",
                        "name": "age",
                        "minimum": 0,
                        "maximum": 127,
                        "error": "AgeOutOfRange",
                    },
                ]
            },
        )
        output = render_result(result)
        assert "[1, 50]" in output
        assert "[0, 127]" in output
        assert "AgeOutOfRange" in output


class TestQuiet:
    def test_ok(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="rules")) == "OK: rules"

    def test_error_without_payload(self) -> None:
        assert render_quiet(ServiceResult(ok=False, op="x")) == "ERROR: x - Unknown error"


def test_unknown_op_uses_generic_renderer() -> None:
    output = render_result(ServiceResult(ok=True, op="other", data={"items": [1, 2]}))
    assert "items: [1,2]" in output
