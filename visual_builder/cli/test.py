"""Tests for the command line interface."""

import json

import pytest

from visual_builder.exporters import export_json

from .lib import build_parser, main


@pytest.fixture
def forest_file(tmp_path, sample_tree):
    """Write ``sample_tree`` to a JSON file."""
    path = tmp_path / "forest.json"
    path.write_text(export_json(sample_tree), encoding="utf-8")
    return path


class TestParser:
    """Tests for argument parsing."""

    @pytest.mark.unit
    def test_no_command(self, capsys):
        """Running without a command prints help and fails."""
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out

    @pytest.mark.unit
    def test_source_required(self):
        """Export needs a template or an input file."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["export"])

    @pytest.mark.unit
    def test_sources_exclusive(self, forest_file):
        """Template and input cannot be combined."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["tree", "-t", "navbar", "-i", str(forest_file)])


class TestListingCommands:
    """Tests for registry, frameworks and templates commands."""

    @pytest.mark.unit
    def test_registry(self, capsys):
        """Every registered type is listed."""
        assert main(["registry"]) == 0
        out = capsys.readouterr().out
        assert len(out.splitlines()) == 18
        assert "container" in out

    @pytest.mark.unit
    def test_registry_category(self, capsys):
        """Category filter is case-insensitive."""
        assert main(["registry", "--category", "layout"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines
        assert all("Layout" in line for line in lines)

    @pytest.mark.unit
    def test_registry_unknown_category(self):
        """Unknown categories fail."""
        assert main(["registry", "--category", "widgets"]) == 1

    @pytest.mark.unit
    def test_registry_json(self, capsys):
        """JSON output holds full definitions."""
        assert main(["registry", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0]["type"] == "container"
        assert "default_props" in data[0]

    @pytest.mark.unit
    def test_frameworks(self, capsys):
        """Registered renderers are listed."""
        assert main(["frameworks"]) == 0
        assert capsys.readouterr().out.split() == ["react", "vue", "angular", "svelte"]

    @pytest.mark.unit
    def test_templates_search(self, capsys):
        """Search narrows the listing."""
        assert main(["templates", "--search", "login"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("login-form")
        assert len(out.splitlines()) == 1

    @pytest.mark.unit
    def test_templates_category(self, capsys):
        """Category narrows the listing."""
        assert main(["templates", "--category", "Forms"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 2


class TestForestCommands:
    """Tests for tree, validate and export commands."""

    @pytest.mark.unit
    def test_tree_from_file(self, capsys, forest_file):
        """Input files print as text trees."""
        assert main(["tree", "--input", str(forest_file)]) == 0
        assert capsys.readouterr().out.startswith("Page [container]\n")

    @pytest.mark.unit
    def test_tree_from_template(self, capsys):
        """Templates print as text trees."""
        assert main(["tree", "--template", "navbar"]) == 0
        assert capsys.readouterr().out.startswith("Navbar [container, row]\n")

    @pytest.mark.unit
    def test_unknown_template(self):
        """Unknown templates fail."""
        assert main(["tree", "--template", "missing"]) == 1

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        """Unreadable input fails."""
        assert main(["tree", "--input", str(tmp_path / "nope.json")]) == 1

    @pytest.mark.unit
    def test_malformed_json(self, tmp_path):
        """Malformed JSON fails."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["validate", "--input", str(path)]) == 1

    @pytest.mark.unit
    def test_validate_ok(self, forest_file):
        """A valid forest passes."""
        assert main(["validate", "--input", str(forest_file)]) == 0

    @pytest.mark.unit
    def test_validate_reports_errors(self, capsys, tmp_path):
        """Structural errors are printed and fail the command."""
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": "t",
                        "type": "text",
                        "children": [{"id": "b", "type": "button"}],
                    }
                ]
            ),
            encoding="utf-8",
        )
        assert main(["validate", "--input", str(path)]) == 1
        assert "constraint_violation: t:" in capsys.readouterr().out

    @pytest.mark.unit
    def test_export_stdout(self, capsys, forest_file):
        """Export prints code for the chosen framework."""
        args = ["export", "-i", str(forest_file), "--framework", "vue", "--styling", "css"]
        assert main(args) == 0
        assert capsys.readouterr().out.startswith("<template>\n")

    @pytest.mark.unit
    def test_export_to_file(self, tmp_path):
        """Export writes to --output."""
        target = tmp_path / "Navbar.tsx"
        args = [
            "export",
            "--template",
            "navbar",
            "--framework",
            "react",
            "--typescript",
            "--no-imports",
            "--name",
            "Navbar",
            "--output",
            str(target),
        ]
        assert main(args) == 0
        code = target.read_text(encoding="utf-8")
        assert code.startswith("export const Navbar: React.FC = () => {")

    @pytest.mark.unit
    def test_export_unwritable_output(self, tmp_path):
        """Write failures are reported with exit code 1."""
        target = tmp_path / "missing" / "Navbar.jsx"
        assert main(["export", "-t", "navbar", "--output", str(target)]) == 1
        assert not target.exists()

    @pytest.mark.unit
    def test_export_template_name(self, capsys):
        """Template exports default to a name derived from the template."""
        args = ["export", "-t", "login-form", "--framework", "react", "--no-imports"]
        assert main(args) == 0
        assert capsys.readouterr().out.startswith("export const LoginForm = () => {")

    @pytest.mark.unit
    def test_export_json_format(self, capsys, forest_file):
        """JSON format reproduces the forest."""
        assert main(["export", "-i", str(forest_file), "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [node["id"] for node in data] == ["page", "footer"]

    @pytest.mark.unit
    def test_export_framework_from_env(self, capsys, forest_file, monkeypatch):
        """Unset flags fall back to configuration."""
        monkeypatch.setenv("BUILDER_FRAMEWORK", "svelte")
        assert main(["export", "-i", str(forest_file), "--no-imports"]) == 0
        assert capsys.readouterr().out.startswith("<div ")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "extra",
        [
            ["--framework", "ember"],
            ["--format", "yaml"],
            ["--styling", "less"],
            ["--name", "not a name"],
        ],
    )
    def test_export_bad_options(self, forest_file, extra):
        """Bad export options fail with exit code 1."""
        assert main(["export", "-i", str(forest_file), *extra]) == 1
