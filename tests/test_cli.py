import json
from typer.testing import CliRunner
from errxpect.cli import app

runner = CliRunner()


def test_schema_writes_file(tmp_path):
    out = tmp_path / "nested" / "schema.json"
    result = runner.invoke(app, ["schema", "--out", str(out)])
    assert result.exit_code == 0
    assert out.exists()
    schema = json.loads(out.read_text())
    assert schema["title"] == "errxpect config"
    assert "failure_mode" in schema["properties"]
    assert schema["additionalProperties"] is False


def test_schema_defaults_to_schemas_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["schema"])
    assert result.exit_code == 0
    assert (tmp_path / "schemas" / "errxpect.schema.json").exists()


def test_check_config_valid(tmp_path):
    config = tmp_path / "errxpect.yaml"
    config.write_text("failure_mode: collect\n")
    result = runner.invoke(app, ["check-config", str(config)])
    assert result.exit_code == 0
    assert "failure_mode: 'collect'" in result.output


def test_check_config_invalid(tmp_path):
    config = tmp_path / "errxpect.yaml"
    config.write_text("failure_mode: explode\n")
    result = runner.invoke(app, ["check-config", str(config)])
    assert result.exit_code == 1


def test_check_config_missing_file():
    result = runner.invoke(app, ["check-config", "/tmp/nonexistent-errxpect.yaml"])
    assert result.exit_code != 0
