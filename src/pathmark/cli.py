"""CLI interface for Pathmark"""

import logging
from pathlib import Path
from typing import Optional

import click

from pathmark.application.annotator import Annotator
from pathmark.application.tree_renderer import TreeRenderer
from pathmark.domain.models.outcome import AnnotationReport, FileOutcome
from pathmark.infrastructure.config.config_manager import ConfigManager, ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _load_config(verbose: bool) -> ConfigManager:
    try:
        return ConfigManager()
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)


def _echo_progress(outcome: FileOutcome) -> None:
    """Print ``[INSERT]``/``[UPDATE]`` lines as files are rewritten"""
    if outcome.changed:
        click.echo(outcome.label)


def _output_annotation_summary(report: AnnotationReport) -> None:
    """Output annotation statistics to console

    Args:
        report: Annotation report
    """
    stats = report.stats
    click.echo(
        f"Inserted: {stats['inserted']}, updated: {stats['updated']}, "
        f"unchanged: {stats['unchanged']}, skipped: {stats['skipped']}"
    )
    if report.failures:
        click.echo(f"Failed: {len(report.failures)}", err=True)
    if report.dry_run:
        click.echo("(Dry run - no files written)")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """Pathmark - path annotations and project trees"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("root", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--dry-run", is_flag=True, help="Report what would change without writing")
@click.option("--strict", is_flag=True, help="Exit with an error if any file failed")
@click.pass_context
def annotate(ctx, root: str, dry_run: bool, strict: bool):
    """Insert or update a path comment at the top of every supported file.

    ROOT: Directory to annotate (default: current directory)
    """
    verbose = ctx.obj.get("verbose", False)
    config_manager = _load_config(verbose)

    click.echo("Adding relative path comments to files...\n")
    annotator = Annotator(
        root,
        config=config_manager.get_annotate_config(),
        dry_run=dry_run,
        reporter=_echo_progress,
    )
    report = annotator.annotate_tree()
    click.echo("\nDone.")
    _output_annotation_summary(report)

    if strict and report.failures:
        _die(f"{len(report.failures)} file(s) could not be annotated", verbose=verbose)


@cli.command()
@click.argument("root", default=".", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the tree to a file instead of stdout",
)
@click.option("--no-remarks", is_flag=True, help="Omit inline remarks for well-known files")
@click.pass_context
def tree(ctx, root: str, output: Optional[Path], no_remarks: bool):
    """Print a filtered, sorted view of the directory structure.

    ROOT: Directory to render (default: current directory)
    """
    verbose = ctx.obj.get("verbose", False)
    config_manager = _load_config(verbose)

    renderer = TreeRenderer(config_manager.get_tree_config(), show_remarks=not no_remarks)
    text = renderer.render_tree(root)

    if output is not None:
        try:
            output.write_text(text, encoding="utf-8")
        except OSError as e:
            _die(f"Cannot write {output}: {e}", verbose=verbose, exc=e)
        click.echo(f"Tree written to {output}")
        return

    click.echo("Generating Project Structure...\n")
    click.echo(text)


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
