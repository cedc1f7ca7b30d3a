import functools
import json
import sys

import click
import hjson
from loguru import logger

from gradle_utils import GradlePropertiesEditor
from gradle_utils.data import load_settings

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str, log_file=None):
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> <blue>|</blue> <lvl>{level:<7}</lvl> <blue>|</blue> <lvl>{message}</lvl>",
        level=level,
        colorize=True,
    )
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {message}",
            level="DEBUG",
            colorize=False,
        )


def handle_filesystem_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except OSError as e:
            logger.error(f"Could not access {e.filename or 'gradle.properties'}: {e.strerror or e}")
            raise click.ClickException(str(e)) from e

    return wrapper


@click.group()
@click.option(
    "--platform-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Android platform directory holding gradle.properties",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for stderr",
)
@click.option("--log-file", default=None, help="Also write a debug log to this file")
@click.pass_context
def cli(ctx, platform_dir, log_level, log_file):
    settings = load_settings()
    setup_logging(
        (log_level or settings.log_level).upper(), log_file or settings.log_file
    )
    ctx.obj = GradlePropertiesEditor(platform_dir or settings.platform_dir)


@cli.command()
@click.pass_obj
@handle_filesystem_errors
def configure(editor: GradlePropertiesEditor):
    """Add the recommended defaults that are missing."""
    editor.configure()
    logger.success(f"Configured {editor.gradle_file_path}")


@cli.command()
@click.argument("key")
@click.pass_context
@handle_filesystem_errors
def get(ctx, key):
    """Print the value of KEY."""
    value = ctx.obj.get(key)
    if value is None:
        logger.warning(f"{key} is not set.")
        ctx.exit(1)
    click.echo(value)


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--comment", default=None, help="Comment to put above the property")
@click.pass_obj
@handle_filesystem_errors
def set_(editor: GradlePropertiesEditor, key, value, comment):
    """Set KEY to VALUE and save."""
    editor.set(key, value, comment)
    editor.save()


@cli.command()
@click.argument("key")
@click.pass_obj
@handle_filesystem_errors
def unset(editor: GradlePropertiesEditor, key):
    """Remove KEY and save."""
    editor.set(key, None)
    editor.save()


@cli.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "hjson"]),
    default="json",
    help="Output format",
)
@click.pass_obj
@handle_filesystem_errors
def show(editor: GradlePropertiesEditor, output_format):
    """Print every property."""
    properties = editor.to_dict()
    if output_format == "hjson":
        click.echo(hjson.dumps(properties, indent=4))
    else:
        click.echo(json.dumps(properties, indent=4))
