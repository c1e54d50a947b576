"""Main CLI entry point for goscaffold.

This module provides the main CLI group that organizes all goscaffold
commands under the `goscaffold` command namespace.

Exit status:
    0    success
    1    usage errors (missing subcommand, missing or invalid arguments)
    2    generation failures
    130  interrupted (Ctrl+C)
"""

import sys

import click

# Fix Windows console encoding to support Unicode characters (✓, ✗, ⚠️, etc.)
if sys.platform == "win32":
    import io

    if sys.stdout.encoding.lower() != "utf-8":
        sys.stdout = io.TextIOWrapper(
            sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
        )
    if sys.stderr.encoding.lower() != "utf-8":
        sys.stderr = io.TextIOWrapper(
            sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
        )

from goscaffold import __version__

USAGE_EXIT_CODE = 1
FAILURE_EXIT_CODE = 2
INTERRUPT_EXIT_CODE = 130


class LazyGroup(click.Group):
    """Click group that lazily loads subcommands and exits 1 on usage errors."""

    commands_map = {
        "create": "goscaffold.cli.create_cmd",
        "components": "goscaffold.cli.components_cmd",
    }

    def get_command(self, ctx, cmd_name):
        """Lazily import and return the command when it's invoked."""
        if cmd_name not in self.commands_map:
            return None

        import importlib

        mod = importlib.import_module(self.commands_map[cmd_name])
        return getattr(mod, cmd_name)

    def list_commands(self, ctx):
        """Return list of available commands (for --help)."""
        return list(self.commands_map)

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = USAGE_EXIT_CODE
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = USAGE_EXIT_CODE
            raise


@click.group(cls=LazyGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="goscaffold")
@click.option(
    "--config",
    "config_path",
    envvar="GOSCAFFOLD_CONFIG",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file (default: ./goscaffold.yml if present)",
)
@click.pass_context
def cli(ctx, config_path):
    """goscaffold - Go service project generator.

    Generates a new Go service project from the bundled templates.

    Use 'goscaffold COMMAND --help' for more information on a specific command.

    Examples:

    \b
      goscaffold create demo --module=example.com/demo
      goscaffold create demo --module=example.com/demo --with=api --port=9090
      goscaffold components
    """
    from goscaffold.errors import ConfigurationError
    from goscaffold.utils.config import get_config_builder

    from .styles import initialize_theme_from_config

    if config_path:
        try:
            get_config_builder(config_path, set_as_default=True)
        except ConfigurationError as e:
            raise click.UsageError(str(e), ctx=ctx) from e

    initialize_theme_from_config()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_usage())
        click.echo(f"\nCommands: {', '.join(ctx.command.list_commands(ctx))}")
        ctx.exit(USAGE_EXIT_CODE)


def main():
    """Entry point for the goscaffold CLI.

    Click runs outside standalone mode; exit statuses are mapped here.
    """
    try:
        exit_code = cli(prog_name="goscaffold", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.exceptions.Exit as e:
        sys.exit(e.exit_code)
    except (click.Abort, KeyboardInterrupt):
        click.echo("\nAborted.", err=True)
        sys.exit(INTERRUPT_EXIT_CODE)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(FAILURE_EXIT_CODE)

    # Outside standalone mode ctx.exit() codes come back as the return value
    if isinstance(exit_code, int):
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
