"""Template management for project scaffolding.

This module provides the TemplateManager class which handles:
- Discovery of the bundled project template tree in the goscaffold package
- Rendering Jinja2 templates (``*.tmpl``) with project-specific context
- Copying all other template files byte-for-byte
- Leaving out the files of components that were not selected

Existing files are never overwritten; the first collision aborts the walk.
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from goscaffold.cli.components import (
    COMPONENT_PATHS,
    owning_component,
    parse_components,
    primary_component,
    should_skip,
    unknown_components,
)
from goscaffold.errors import ConfigurationError, DestinationExistsError, TemplateRenderError
from goscaffold.utils.logger import get_logger

logger = get_logger("scaffolder")

TEMPLATE_SUFFIX = ".tmpl"
DEFAULT_PORT = 8080


@dataclass
class RenderContext:
    """Values available to every ``.tmpl`` file.

    ``components`` lists the selected known components in declaration order
    and ``entrypoint`` is the first of them, or None when there is none.
    """

    project: str
    module: str
    port: int
    components: list[str] = field(default_factory=list)
    entrypoint: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ScaffoldOptions:
    """Options for one generation run.

    Attributes:
        project: Project name, also the destination directory name
        module: Go module path (e.g. github.com/acme/backend-example)
        port: HTTP port written into the rendered settings
        components: Selected component names
        output_dir: Directory in which the project directory is created
    """

    project: str
    module: str
    port: int = DEFAULT_PORT
    components: set[str] = field(default_factory=lambda: set(COMPONENT_PATHS))
    output_dir: Path = field(default_factory=lambda: Path("."))

    @classmethod
    def from_cli(
        cls, project: str, module: str, port: int, with_components: str, output_dir: str | Path
    ) -> "ScaffoldOptions":
        """Build options from raw command-line values."""
        return cls(
            project=project,
            module=module,
            port=port,
            components=parse_components(with_components),
            output_dir=Path(output_dir),
        )

    def validate(self) -> None:
        """Check required fields.

        Raises:
            ConfigurationError: If the project name or module path is empty
        """
        if not self.project or not self.project.strip():
            raise ConfigurationError("project name is required")
        if not self.module or not self.module.strip():
            raise ConfigurationError("--module is required")

    @property
    def project_dir(self) -> Path:
        return self.output_dir / self.project

    def render_context(self) -> RenderContext:
        return RenderContext(
            project=self.project,
            module=self.module,
            port=self.port,
            components=[name for name in COMPONENT_PATHS if name in self.components],
            entrypoint=primary_component(self.components),
        )


@dataclass
class ScaffoldReport:
    """What a generation run did.

    Attributes:
        project_dir: Destination root
        directories: Directories created (or already present) under the root
        files: Files written, in walk order
        skipped: Template paths left out because their component was not selected
    """

    project_dir: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class TemplateManager:
    """Generates projects from the bundled template tree.

    The tree is walked depth-first in lexical order. Directories owned by an
    unselected component are not descended into. Files ending in ``.tmpl``
    are rendered with Jinja2 and written without the suffix; every other file
    is copied unchanged.

    Attributes:
        template_root: Root of the project template tree
        jinja_env: Jinja2 environment for template rendering
    """

    def __init__(self, template_root: Path | None = None):
        """Initialize template manager.

        Args:
            template_root: Template tree to use. Defaults to the tree bundled
                with the installed goscaffold package.
        """
        self.template_root = Path(template_root) if template_root else self._get_template_root()
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_root)),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def _get_template_root(self) -> Path:
        """Get path to the bundled project template tree.

        Returns:
            Path to templates/project in the goscaffold package

        Raises:
            RuntimeError: If the template tree cannot be found
        """
        import goscaffold.templates

        template_path = Path(goscaffold.templates.__file__).parent / "project"
        if template_path.is_dir():
            return template_path

        raise RuntimeError(
            "Could not locate goscaffold templates directory. "
            "Ensure goscaffold is properly installed."
        )

    def render_template(self, template_path: str, context: dict[str, Any]) -> bytes:
        """Render a single template file.

        Args:
            template_path: '/' separated path relative to the template root
            context: Variables for template rendering

        Returns:
            Rendered content encoded as UTF-8

        Raises:
            TemplateRenderError: If the template fails to parse or render
        """
        try:
            template = self.jinja_env.get_template(template_path)
            rendered = template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(template_path, e) from e
        return rendered.encode("utf-8")

    def create_project(self, options: ScaffoldOptions) -> ScaffoldReport:
        """Create a project from the template tree.

        This is the main entry point for project creation. It:
        1. Validates the options
        2. Creates the destination root
        3. Walks the template tree, rendering or copying each kept entry

        Args:
            options: Generation options

        Returns:
            ScaffoldReport describing the written output

        Raises:
            ConfigurationError: Before any filesystem change, if options are invalid
            DestinationExistsError: If a destination file already exists
            TemplateRenderError: If a template fails to render
            OSError: On filesystem failures

        Examples:
            >>> manager = TemplateManager()
            >>> report = manager.create_project(
            ...     ScaffoldOptions(project="demo", module="example.com/demo")
            ... )
            >>> report.project_dir
            PosixPath('demo')
        """
        options.validate()

        ignored = unknown_components(options.components)
        if ignored:
            logger.debug(f"Ignoring unknown components: {', '.join(sorted(ignored))}")

        project_dir = options.project_dir
        project_dir.mkdir(parents=True, exist_ok=True)
        logger.key_info(f"Generating {options.project} in {project_dir}")

        report = ScaffoldReport(project_dir=project_dir)
        context = options.render_context().as_dict()
        self._walk(self.template_root, "", project_dir, options.components, context, report)

        logger.success(f"Wrote {len(report.files)} files to {project_dir}")
        return report

    def _walk(
        self,
        directory: Path,
        rel_dir: str,
        project_dir: Path,
        selected: set[str],
        context: dict[str, Any],
        report: ScaffoldReport,
    ) -> None:
        """Process the entries of one template directory, recursing into subdirectories."""
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name

            if should_skip(rel_path, selected):
                logger.debug(f"Skipping {rel_path} ({owning_component(rel_path)} not selected)")
                report.skipped.append(rel_path)
                continue

            destination = project_dir / rel_path

            if entry.is_dir():
                destination.mkdir(parents=True, exist_ok=True)
                report.directories.append(destination)
                self._walk(entry, rel_path, project_dir, selected, context, report)
            elif entry.name.endswith(TEMPLATE_SUFFIX):
                destination = destination.with_name(entry.name[: -len(TEMPLATE_SUFFIX)])
                logger.debug(f"Rendering {rel_path}")
                self._write_file(destination, self.render_template(rel_path, context))
                report.files.append(destination)
            else:
                logger.debug(f"Copying {rel_path}")
                self._write_file(destination, entry.read_bytes())
                report.files.append(destination)

    def _write_file(self, destination: Path, content: bytes) -> None:
        """Write content to a new file, refusing to overwrite.

        Raises:
            DestinationExistsError: If the destination already exists
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(destination, "xb") as f:
                f.write(content)
        except FileExistsError as e:
            raise DestinationExistsError(destination) from e
