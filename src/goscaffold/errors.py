"""Error classes for project generation.

Generation failures fall into four groups:

    1. **ConfigurationError**: required options missing or the configuration
       file is unusable. Raised before anything is written.
    2. **DestinationExistsError**: a file the template tree would produce is
       already present. The walk stops at that file.
    3. **TemplateRenderError**: a ``.tmpl`` file failed to parse or render.
    4. Filesystem errors are not wrapped; ``OSError`` propagates as raised.

There is no rollback. A failed run can leave a partially populated
destination directory behind.
"""

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all goscaffold errors."""

    pass


class ConfigurationError(ScaffoldError):
    """Required configuration is missing or invalid."""

    pass


class DestinationExistsError(ScaffoldError):
    """Raised instead of overwriting an existing file.

    Attributes:
        path: Destination path that already exists
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"file exists: {self.path}")


class TemplateRenderError(ScaffoldError):
    """A template file could not be parsed or rendered.

    Attributes:
        template: Template path relative to the template tree root
        cause: The underlying Jinja2 error
    """

    def __init__(self, template: str, cause: Exception):
        self.template = template
        self.cause = cause
        super().__init__(f"failed to render template '{template}': {cause}")
