"""
Command-line interface for LoopStrength
"""

import sys
import traceback
from pathlib import Path

import click

from . import __version__, check_dependencies, get_info
from .config import (Config, PathConfig, load_config, save_config, validate_config,
                     validate_paths)
from .core import LoopStrengthAnalysis
from .exceptions import LoopStrengthError
from .utils import setup_logging

DEFAULT_CONFIG_FILE = "config_loopstrength.txt"


class CLIContext:
    def __init__(self):
        self.verbose: bool = False


@click.group()
@click.version_option(__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", "-q", is_flag=True, help="Enable quiet mode (minimal output)")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
@click.option("--no-color", is_flag=True, help="Disable colored log output")
@click.pass_context
def main(ctx, verbose, quiet, log_file, no_color):
    """
    LoopStrength: differential chromatin loop strength

    Compares sample loops against randomized loops with an empirical
    two-sided test on log2 fold-changes and reports a results table and a
    volcano plot.
    """
    cli_ctx = CLIContext()
    cli_ctx.verbose = verbose

    log_level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    setup_logging(level=log_level, log_file=log_file, use_colors=not no_color)

    ctx.obj = cli_ctx


@main.command()
@click.argument(
    "config_file",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_FILE,
    required=False,
)
@click.pass_context
def run(ctx, config_file):
    """Run the loop strength analysis described by CONFIG_FILE"""

    cli_ctx = ctx.obj

    try:
        analysis = LoopStrengthAnalysis(config=config_file)
        result = analysis.run()
    except LoopStrengthError as e:
        click.echo(f"Error: {e}", err=True)
        if cli_ctx.verbose:
            traceback.print_exc()
        sys.exit(1)

    significance = result.significance

    click.echo(
        f"Analysis completed successfully. Results saved in: {result.output_directory}"
    )
    click.echo(f"  Sample loops tested: {significance.n_tested}")
    click.echo(f"  Null distribution size: {significance.null_size}")
    click.echo(
        f"  Significant loops (padj < {significance.alpha}): "
        f"{significance.n_significant} ({significance.n_up} up, {significance.n_down} down)"
    )
    if significance.degenerate:
        click.echo(f"  Warning: p-values undefined, {significance.degenerate}")


@main.command("validate-config")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
def validate_config_cmd(config_file):
    """Validate a LoopStrength configuration file"""

    try:
        config = load_config(config_file)
    except LoopStrengthError as e:
        click.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"Configuration loaded successfully: {config_file}")

    issues = validate_config(config, check_paths=False)
    issues.extend(validate_paths(PathConfig.from_config(config)))
    if not issues:
        click.echo("✓ Configuration is valid")
    else:
        click.echo("Configuration issues found:")
        for issue in issues:
            click.echo(f"  ✗ {issue}")
        sys.exit(1)


@main.command("init-config")
@click.argument("output_file", type=click.Path(dir_okay=False))
@click.option(
    "--format",
    type=click.Choice(["txt", "yaml", "json"]),
    default="txt",
    help="Output format for configuration file",
)
def init_config(output_file, format):
    """Initialize a new LoopStrength configuration file"""

    output_path = Path(output_file)

    if output_path.exists():
        if not click.confirm(f"File {output_path} already exists. Overwrite?"):
            click.echo("Configuration initialization cancelled.")
            return

    config = Config(
        sample_loops_path="real_loops.tsv",
        random_loops_path="random_loops.tsv",
        output_directory="results",
    )

    try:
        save_config(config, output_path, format=format)
    except OSError as e:
        click.echo(f"Error creating configuration file: {e}", err=True)
        sys.exit(1)

    click.echo(f"Configuration file created: {output_path}")
    click.echo("Edit this file to point at your loop files.")


@main.command()
def info():
    """Show LoopStrength package information"""

    info_data = get_info()

    click.echo("=" * 50)
    click.echo(f"LoopStrength v{info_data['version']}")
    click.echo("=" * 50)
    click.echo(f"Description: {info_data['description']}")
    click.echo(f"Python version: {info_data['python_version']}")
    click.echo()

    click.echo("Available modules:")
    for module in info_data["modules"]:
        click.echo(f"  - {module}")
    click.echo()

    deps = check_dependencies()
    click.echo("Dependency status:")
    for dep, available in deps.items():
        status = "✓" if available else "✗"
        click.echo(f"  {status} {dep}")


if __name__ == "__main__":
    main()
