"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from api2html.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from api2html.run_execution import RunExecutionError, RunRequest, execute_documentation_run

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="api2html")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Render OpenAPI component schemas as HTML tables."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.argument("input_path", type=click.Path(path_type=str))
@click.argument("selection", nargs=-1)
@click.option(
    "--output",
    "-o",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="HTML file to write; defaults to stdout",
)
@click.option(
    "--no-description",
    "no_description",
    is_flag=True,
    default=False,
    help="Leave schema and field descriptions out of the tables.",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML run configuration file",
)
def render(
    input_path: str,
    selection: tuple[str, ...],
    output_path: str | None,
    no_description: bool,
    config_path: str | None,
) -> None:
    """Render the schemas of INPUT_PATH, or only the SELECTION schema names."""
    try:
        outcome = execute_documentation_run(
            RunRequest(
                input_path=input_path,
                selection=tuple(dict.fromkeys(selection)),
                output_path=output_path,
                include_description=False if no_description else None,
                config_path=config_path,
            ),
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path), err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
