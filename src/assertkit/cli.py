from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="assertkit", help="Assertion library tooling")


@app.command()
def schema(
    out: str = typer.Option(
        "assertkit.schema.json", "--out", help="Where to write the config JSON schema"
    ),
):
    """Write the JSON schema of the assertkit YAML config."""
    from assertkit.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Schema written: {out_path}")


@app.command("check-config")
def check_config(
    config: str = typer.Argument(help="Path to assertkit YAML config"),
):
    """Validate a config file and print the resolved settings."""
    import yaml
    from pydantic import ValidationError

    from assertkit.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        loaded = load_config(config_path)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    typer.echo(yaml.safe_dump(loaded.model_dump(), default_flow_style=False).rstrip())


if __name__ == "__main__":
    app()
