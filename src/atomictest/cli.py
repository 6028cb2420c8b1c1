from __future__ import annotations

from pathlib import Path
import sys

import typer

app = typer.Typer(name="atomictest", help="Check console output of atomic examples")

_DEFAULT_CONFIG = """\
# Prefix printed in front of every failed assertion.
error_tag: "[Error]: "
# Absolute tolerance for float equality.
float_tolerance: 1.0e-7
# Echo the actual value of every comparison.
echo: true
"""


@app.command()
def scan(
    log: str = typer.Argument(help="Captured console output to scan, or '-' for stdin"),
    config: str | None = typer.Option(None, help="Path to atomictest YAML config"),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report to this path"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str = typer.Option(
        "atomictest-debug.log", help="Debug log file written when --verbose is set"
    ),
):
    """Report error-tagged lines in captured output; exit 1 if any are found."""
    import yaml

    from atomictest.config import KitConfig, load_config
    from atomictest.scan import scan_file, scan_lines

    if verbose:
        from atomictest.verbose import setup_logger

        setup_logger(Path(debug_log), verbose=True, logger_name="atomictest")

    kit_config = KitConfig()
    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            kit_config = load_config(config_path)
        except (ValueError, yaml.YAMLError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    if log == "-":
        source_name = "<stdin>"
        diagnostics = scan_lines(sys.stdin, kit_config.error_tag)
    else:
        log_path = Path(log)
        if not log_path.exists():
            typer.echo(f"Error: output file not found: {log}", err=True)
            raise typer.Exit(1)
        source_name = log
        diagnostics = scan_file(log_path, kit_config.error_tag)

    for diagnostic in diagnostics:
        typer.echo(f"{source_name}:{diagnostic.line_number}: {diagnostic.text}")

    if junit is not None:
        from atomictest.reporting.junit import write_junit

        report_path = write_junit(Path(junit), source_name, diagnostics)
        typer.echo(f"Report: {report_path}")

    if diagnostics:
        typer.echo(f"{len(diagnostics)} failed assertion(s) in {source_name}")
        raise typer.Exit(1)
    typer.echo(f"No failed assertions in {source_name}")


@app.command()
def init(
    dir: str = typer.Option(
        ".", "--dir", help="Directory to write atomictest.yaml into"
    ),
):
    """Write a default atomictest.yaml config."""
    project_dir = Path(dir)

    if not project_dir.exists():
        project_dir.mkdir(parents=True, exist_ok=True)

    config_file = project_dir / "atomictest.yaml"
    if config_file.exists():
        typer.echo(f"atomictest.yaml already exists in {dir}, skipping.")
        return

    config_file.write_text(_DEFAULT_CONFIG)
    typer.echo(f"Wrote {config_file}")
