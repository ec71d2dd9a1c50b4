"""End-to-end checks on generated Go source trees.

Config file, walker, classifier, graph builder and evaluator together,
driven through the public API and the CLI.
"""

from io import StringIO
from pathlib import Path

import pytest

from layercheck import create_go_checker, load_config
from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.enums import DiagnosticKind, EdgeKind
from layercheck.domain.model.layer import LAYER_ROOT, LAYER_UNKNOWN
from layercheck.presentation.cli import EXIT_OK, main
from tests.factories import write_go_file, write_go_module

M = "example.com/m"

CONFIG = """\
layers:
  domain:
    paths: ["**/domain/**"]
  application:
    paths: ["**/app/**"]
  infrastructure:
    paths: ["**/infra/**"]

dependency_rules:
  - from: domain
    to: domain
    allow: true
  - from: domain
    to: "*"
    allow: false
  - from: application
    to: infrastructure
    allow: false
  - from: "*"
    to: "cloud.google.com/*"
    allow: false

exclude_dirs:
  - "**/vendor"
  - "**/testdata"
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "layers.yaml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = write_go_module(tmp_path / "m", M)
    write_go_file(root, imports=(f"{M}/internal/app",), name="main.go", package="main")
    write_go_file(root / "internal" / "domain", imports=("errors",))
    write_go_file(
        root / "internal" / "app",
        imports=(f"{M}/internal/domain", f"{M}/misc", "context"),
    )
    write_go_file(
        root / "internal" / "infra",
        imports=(f"{M}/internal/domain", "cloud.google.com/go/firestore"),
    )
    write_go_file(root / "misc")
    write_go_file(root / "vendor" / "x.io" / "lib", imports=(f"{M}/internal/infra",))
    (root / "testdata").mkdir()
    (root / "testdata" / "invalid.go").write_text("this is not go\n", encoding="utf-8")
    return root


def _check(project: Path, config_path: Path) -> CheckResult:
    return create_go_checker(load_config(config_path)).check(project)


class TestSingleViolation:
    """Module m whose domain package imports the infrastructure package."""

    def test_exactly_one_layer_violation(self, tmp_path: Path, config_path: Path) -> None:
        root = write_go_module(tmp_path / "single", "m")
        write_go_file(root / "domain", imports=("m/infra",))
        write_go_file(root / "infra")
        config_path.write_text(
            "layers:\n"
            "  domain: {paths: [domain]}\n"
            "  infrastructure: {paths: [infra]}\n"
            "dependency_rules:\n"
            "  - {from: domain, to: domain, allow: true}\n"
            "  - {from: domain, to: '*', allow: false}\n",
            encoding="utf-8",
        )

        result = _check(root, config_path)

        assert [str(v) for v in result.violations] == [
            "LAYER VIOLATION: m/domain (domain) -> infrastructure"
        ]

    def test_cli_output(self, tmp_path: Path, config_path: Path) -> None:
        root = write_go_module(tmp_path / "single", "m")
        write_go_file(root / "domain", imports=("m/infra",))
        write_go_file(root / "infra")
        config_path.write_text(
            "layers:\n"
            "  domain: [domain]\n"
            "  infrastructure: [infra]\n"
            "dependency_rules:\n"
            "  - {from: domain, to: '*', allow: false}\n",
            encoding="utf-8",
        )
        stdout = StringIO()

        code = main(
            ["--project-root", str(root), "--config", str(config_path)],
            stdout=stdout,
            stderr=StringIO(),
        )

        assert code == EXIT_OK
        assert stdout.getvalue().splitlines() == [
            "LAYER VIOLATION: m/domain (domain) -> infrastructure",
            "Result: FAILED (2 packages, 1 edges, 1 violations, 0 errors)",
        ]


class TestLayeredProject:
    """Multi-layer module with root, unknown, vendored and testdata packages."""

    def test_layers(self, project: Path, config_path: Path) -> None:
        result = _check(project, config_path)
        layers = {u.path: u.layer for u in result.units}
        assert layers == {
            M: LAYER_ROOT,
            f"{M}/internal/app": "application",
            f"{M}/internal/domain": "domain",
            f"{M}/internal/infra": "infrastructure",
            f"{M}/misc": LAYER_UNKNOWN,
        }

    def test_excluded_directories_produce_nothing(self, project: Path, config_path: Path) -> None:
        result = _check(project, config_path)
        assert result.issues == ()
        assert not any("vendor" in u.path or "testdata" in u.path for u in result.units)
        assert not any("vendor" in d.unit or "testdata" in d.unit for d in result.diagnostics)

    def test_violations(self, project: Path, config_path: Path) -> None:
        result = _check(project, config_path)
        assert [(v.kind, v.unit, v.target) for v in result.violations] == [
            (EdgeKind.EXTERNAL, f"{M}/internal/domain", "errors"),
            (EdgeKind.EXTERNAL, f"{M}/internal/infra", "cloud.google.com/go/firestore"),
        ]

    def test_unknown_import_warning(self, project: Path, config_path: Path) -> None:
        result = _check(project, config_path)
        unknown = [d for d in result.warnings if d.kind is DiagnosticKind.UNKNOWN_IMPORT]
        assert [(d.unit, d.target) for d in unknown] == [(f"{M}/internal/app", f"{M}/misc")]

    def test_unclassified_warning(self, project: Path, config_path: Path) -> None:
        result = _check(project, config_path)
        unclassified = [d.unit for d in result.warnings if d.kind is DiagnosticKind.UNCLASSIFIED]
        assert unclassified == [f"{M}/misc"]

    def test_root_imports_resolve(self, project: Path, config_path: Path) -> None:
        root = _check(project, config_path).unit(M)
        assert root is not None
        assert root.layer_deps == ("application",)

    def test_repeatable(self, project: Path, config_path: Path) -> None:
        first = _check(project, config_path)
        second = _check(project, config_path)
        assert first.violations == second.violations
        assert first.diagnostics == second.diagnostics
