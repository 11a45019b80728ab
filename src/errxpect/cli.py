from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="errxpect", help="Tooling for errxpect config files")


@app.command()
def schema(
    out: str = typer.Option(
        "schemas/errxpect.schema.json", help="Output path for the JSON Schema"
    ),
):
    """Write the JSON Schema of the errxpect YAML config."""
    from errxpect.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")


@app.command("check-config")
def check_config(
    config: str = typer.Argument(help="Path to errxpect YAML config"),
):
    """Validate a config file and print the effective settings."""
    from pydantic import ValidationError

    from errxpect.config import ConfigError, load_config

    try:
        cfg = load_config(Path(config))
    except (ConfigError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for key, value in cfg.model_dump(mode="json").items():
        typer.echo(f"{key}: {value!r}")
