"""Tests for application/reporters/console.py."""

import pytest

from layercheck.application.reporters import ConsoleConfig, ConsoleReporter
from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.scan_result import ScanIssue
from tests.factories import make_check_result


def _render(result: CheckResult, **kwargs: object) -> str:
    config = ConsoleConfig(color=False, **kwargs)  # type: ignore[arg-type]
    return ConsoleReporter(config).report(result)


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_defaults(self) -> None:
        config = ConsoleConfig()
        assert not config.verbose
        assert config.show_warnings
        assert config.width == 120

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=39)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_returns_string(self) -> None:
        output = _render(CheckResult.empty())
        assert isinstance(output, str)
        assert "LAYER CHECK" in output
        assert "PASSED" in output

    def test_failed_status_and_violations(self) -> None:
        output = _render(make_check_result())
        assert "FAILED" in output
        assert "VIOLATIONS" in output
        assert "infrastructure" in output
        assert "EXTERNAL" in output

    def test_warnings_section(self) -> None:
        output = _render(make_check_result())
        assert "WARNINGS" in output
        assert "example.com/m/misc" in output

    def test_warnings_hidden(self) -> None:
        assert "WARNINGS" not in _render(make_check_result(), show_warnings=False)

    def test_errors_section(self) -> None:
        output = _render(make_check_result())
        assert "ERRORS" in output
        assert "broken.go" in output

    def test_units_table_only_when_verbose(self) -> None:
        assert "PACKAGES" not in _render(make_check_result())
        assert "PACKAGES" in _render(make_check_result(), verbose=True)

    def test_no_ansi_without_color(self) -> None:
        assert "\x1b[" not in _render(make_check_result())

    def test_markup_in_names_is_escaped(self) -> None:
        """Package text that looks like rich markup is printed literally."""
        result = make_check_result()
        odd = CheckResult(
            units=result.units,
            verdicts=result.verdicts,
            diagnostics=result.diagnostics,
            issues=(ScanIssue(result.issues[0].path, "got '[bold]' at offset 3"),),
            stats=result.stats,
        )
        assert "[bold]" in _render(odd)
