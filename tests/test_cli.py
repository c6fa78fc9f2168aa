import json
import textwrap

from typer.testing import CliRunner

from assertkit.cli import app

runner = CliRunner()


def test_schema_writes_json_schema(tmp_path):
    out = tmp_path / "schemas" / "assertkit.schema.json"
    result = runner.invoke(app, ["schema", "--out", str(out)])
    assert result.exit_code == 0
    schema = json.loads(out.read_text())
    assert set(schema["properties"]) == {"deep_equal", "source", "logging"}


def test_schema_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["schema"])
    assert result.exit_code == 0
    assert (tmp_path / "assertkit.schema.json").exists()


def test_check_config_missing_file():
    result = runner.invoke(app, ["check-config", "nonexistent.yaml"])
    assert result.exit_code != 0


def test_check_config_valid(tmp_path):
    path = tmp_path / "assertkit.yaml"
    path.write_text(textwrap.dedent("""\
        deep_equal:
          cycle_guard: true
    """))
    result = runner.invoke(app, ["check-config", str(path)])
    assert result.exit_code == 0
    assert "cycle_guard: true" in result.output


def test_check_config_invalid(tmp_path):
    path = tmp_path / "assertkit.yaml"
    path.write_text("deep_equal:\n  unknown_option: 1\n")
    result = runner.invoke(app, ["check-config", str(path)])
    assert result.exit_code == 1
