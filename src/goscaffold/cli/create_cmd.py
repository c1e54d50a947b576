"""Project creation command.

This module provides the 'goscaffold create' command which generates a new
Go service project from the bundled templates, with only the selected
components included.
"""

import logging

import click
from rich.markup import escape

from goscaffold.cli.components import DEFAULT_COMPONENTS, primary_component
from goscaffold.cli.templates import DEFAULT_PORT, ScaffoldOptions, TemplateManager
from goscaffold.errors import ConfigurationError, ScaffoldError
from goscaffold.utils.config import get_config_value
from goscaffold.utils.logger import set_log_level

from .main import FAILURE_EXIT_CODE
from .styles import Messages, get_console

PORT_RANGE = click.IntRange(1, 65535)


def next_step_command(project: str, components: set[str]) -> str:
    """Build the suggested command for running the generated project.

    Examples:
        >>> next_step_command("demo", {"admin", "api"})
        'cd demo && go mod tidy && go run ./cmd/api/main.go start -c settings/local.json'
        >>> next_step_command("demo", set())
        'cd demo && go mod tidy'
    """
    command = f"cd {project} && go mod tidy"
    component = primary_component(components)
    if component:
        command += f" && go run ./cmd/{component}/main.go start -c settings/local.json"
    return command


@click.command()
@click.argument("project_name", required=False, default="")
@click.option(
    "--module",
    "-m",
    required=True,
    help="Go module path (e.g. github.com/acme/backend-example)",
)
@click.option(
    "--port",
    "-p",
    type=PORT_RANGE,
    default=None,
    help=f"HTTP port (default: {DEFAULT_PORT})",
)
@click.option(
    "--with",
    "with_components",
    default=None,
    help=f"Components to include, csv (default: {DEFAULT_COMPONENTS})",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory in which the project is created (default: current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every generated and skipped file")
@click.pass_context
def create(
    ctx,
    project_name: str,
    module: str,
    port: int | None,
    with_components: str | None,
    output_dir: str | None,
    verbose: bool,
):
    """Create a new Go service project.

    PROJECT_NAME: Name of the project, also the name of the created directory

    Available components:

    \b
      - api:   public HTTP API (cmd/api, internal/app/api, api routes)
      - admin: admin HTTP API (cmd/admin, internal/app/admin, admin routes)
      - task:  background task runner (cmd/task, internal/app/task)

    Existing files are never overwritten. If a file the templates would
    produce already exists, generation stops with an error naming it.

    Examples:

    \b
      # All components on port 8080
      $ goscaffold create demo --module=example.com/demo

      # API only, on a different port
      $ goscaffold create demo --module=example.com/demo --with=api --port=9090

      # Create in a specific location
      $ goscaffold create demo --module=example.com/demo --output-dir /projects
    """
    console = get_console()

    if verbose:
        set_log_level(logging.DEBUG)

    # Command-line values win over configuration defaults
    try:
        if port is None:
            configured_port = get_config_value("create.port")
            if configured_port is not None:
                port = PORT_RANGE.convert(configured_port, None, ctx)
            else:
                port = DEFAULT_PORT
        if with_components is None:
            configured = get_config_value("create.with")
            if configured is None:
                with_components = DEFAULT_COMPONENTS
            elif isinstance(configured, list):
                with_components = ",".join(str(name) for name in configured)
            else:
                with_components = str(configured)
        if output_dir is None:
            output_dir = str(get_config_value("create.output_dir") or ".")
    except (ConfigurationError, click.BadParameter) as e:
        raise click.UsageError(f"invalid configuration: {e}", ctx=ctx) from e

    options = ScaffoldOptions.from_cli(
        project=project_name,
        module=module,
        port=port,
        with_components=with_components,
        output_dir=output_dir,
    )

    try:
        options.validate()
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    console.print(f"🚀 Creating project: [header]{escape(options.project)}[/header]")
    console.print(f"  📦 {Messages.label_value('Module', escape(options.module))}", soft_wrap=True)
    console.print(f"  🔌 {Messages.label_value('Port', str(options.port))}")
    selected = ", ".join(sorted(options.components)) or "none"
    console.print(f"  🧩 {Messages.label_value('Components', escape(selected))}")

    try:
        report = TemplateManager().create_project(options)
    except (ScaffoldError, OSError) as e:
        console.print(Messages.error(f"scaffold error: {escape(str(e))}"), soft_wrap=True)
        ctx.exit(FAILURE_EXIT_CODE)

    console.print(f"  {Messages.success(f'Wrote {len(report.files)} files')}")
    console.print(
        f"\n✅ Done. Project created at: {Messages.path(escape(str(report.project_dir)))}",
        soft_wrap=True,
    )
    console.print("\n📋 [bold]Next:[/bold]")
    console.print(
        f"  {Messages.command(escape(next_step_command(options.project, options.components)))}",
        soft_wrap=True,
    )


if __name__ == "__main__":
    create()
