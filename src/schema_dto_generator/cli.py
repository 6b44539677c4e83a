"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_dto_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    parse_policy,
    write_placeholder_configuration,
)
from schema_dto_generator.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_dto_generation_run,
)

_POLICY_CHOICES = ("auto", "inline", "promote")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-dto-generator")
def cli() -> None:
    """Generate Dart DTO classes from OpenAPI/JSON-Schema documents or examples."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a generator configuration file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.argument("input_paths", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML generator configuration file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory for generated Dart files (defaults to gen/ next to each input)",
)
@click.option(
    "--policy",
    type=click.Choice(_POLICY_CHOICES, case_sensitive=False),
    default=None,
    help="Nested object handling; auto inlines for .json inputs and promotes otherwise.",
)
@click.option(
    "--inline-threshold",
    type=click.IntRange(min=0),
    default=None,
    help="Largest nested object, in properties, that is inlined under the inline policy.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Resolve and render without writing files; list the files that would be written.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log resolution progress.")
def generate(
    input_paths: tuple[str, ...],
    config_path: str | None,
    output_dir: str | None,
    policy: str | None,
    inline_threshold: int | None,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Generate DTO classes for each INPUT_PATHS document."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        resolved_policy = parse_policy(policy, "--policy")
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    for input_path in input_paths:
        try:
            outcome = execute_dto_generation_run(
                GenerationRequest(
                    input_path=input_path,
                    config_path=config_path,
                    output_dir=output_dir,
                    policy=resolved_policy,
                    inline_threshold=inline_threshold,
                    dry_run=dry_run,
                )
            )
        except GenerationError as exc:
            raise CliError(f"{input_path}: {exc}") from exc
        if outcome.dry_run:
            for file_name in outcome.file_names:
                click.echo(str(outcome.output_dir / file_name))
        else:
            for written_path in outcome.written_paths:
                click.echo(str(written_path))


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
