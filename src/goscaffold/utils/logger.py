"""
Component Logger Framework

Provides colored logging for goscaffold components with:
- Rich terminal output with component-specific colors
- Graceful fallbacks when configuration is unavailable
- Simple, clear interface

Usage:
    logger = get_logger("scaffolder")
    logger.key_info("Generating project")
    logger.info("Rendering template")
    logger.debug("Skipped cmd/admin")
    logger.success("Project created")
    logger.warning("Something to note")
    logger.error("Something went wrong")

    # Custom loggers with explicit parameters
    logger = get_logger(name="custom_component", color="blue")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from goscaffold.errors import ConfigurationError
from goscaffold.utils.config import get_config_value


class ComponentLogger:
    """
    Rich-formatted logger for goscaffold components with color coding.

    Message Types:
    - key_info: Important operational information
    - info: Normal operational messages
    - debug: Detailed tracing information
    - warning: Warning messages
    - error: Error messages
    - success: Success messages
    """

    def __init__(self, base_logger: logging.Logger, component_name: str, color: str = "white"):
        """
        Initialize component logger.

        Args:
            base_logger: Underlying Python logger
            component_name: Name of the component (e.g., 'scaffolder', 'cli')
            color: Rich color name for this component
        """
        self.base_logger = base_logger
        self.component_name = component_name
        self.color = color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        """Format message with Rich markup and emoji prefix."""
        prefix = f"{emoji}{self.component_name.title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def key_info(self, message: str) -> None:
        """Important operational information."""
        style = f"bold {self.color}" if self.color != "white" else "bold white"
        self.base_logger.info(self._format_message(message, style))

    def info(self, message: str) -> None:
        """Info message."""
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str) -> None:
        """Debug message for detailed tracing."""
        style = f"dim {self.color}" if self.color != "white" else "dim white"
        self.base_logger.debug(self._format_message(message, style, "🔍 "))

    def warning(self, message: str) -> None:
        """Warning message."""
        self.base_logger.warning(self._format_message(message, "bold yellow", "⚠️  "))

    def error(self, message: str, exc_info: bool = False) -> None:
        """Error message.

        Args:
            message: Error message
            exc_info: Whether to include exception traceback
        """
        self.base_logger.error(self._format_message(message, "bold red", "❌ "), exc_info=exc_info)

    def success(self, message: str) -> None:
        """Success message."""
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))


def _configured_level(default: int) -> int:
    """Read logging.level from configuration, falling back to default."""
    try:
        level_name = get_config_value("logging.level")
    except ConfigurationError:
        return default
    if level_name is None:
        return default
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else default


def _setup_rich_logging(level: int = logging.WARNING) -> None:
    """Configure Rich logging for the root logger (called once)."""
    root_logger = logging.getLogger()

    # Only one RichHandler on the root logger
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.setLevel(_configured_level(level))

    try:
        rich_tracebacks = get_config_value("logging.rich_tracebacks", True)
        show_full_paths = get_config_value("logging.show_full_paths", False)
    except ConfigurationError:
        rich_tracebacks = True
        show_full_paths = False

    # Log records go to stderr so generated output on stdout stays clean
    console = Console(stderr=True, width=120)

    handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        markup=True,
        show_path=show_full_paths,
        show_time=True,
        show_level=True,
        tracebacks_show_locals=False,
    )

    root_logger.addHandler(handler)


def set_log_level(level: int) -> None:
    """Change the root log level after logging has been set up."""
    _setup_rich_logging()
    logging.getLogger().setLevel(level)


def get_logger(
    component_name: str = None,
    level: int = logging.WARNING,
    *,
    name: str = None,
    color: str = None,
) -> ComponentLogger:
    """
    Get a component logger.

    Args:
        component_name: Component name (e.g., 'scaffolder', 'cli')
        level: Root logging level used when logging is first set up
        name: Direct logger name (keyword-only), bypasses color lookup
        color: Direct color specification (keyword-only)

    Returns:
        ComponentLogger instance

    Raises:
        ValueError: If neither component_name nor name is given

    Examples:
        logger = get_logger("scaffolder")
        logger.info("Rendering go.mod")

        logger = get_logger(name="test_logger", color="blue")
    """
    _setup_rich_logging(level)

    if name is not None:
        return ComponentLogger(logging.getLogger(name), name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    base_logger = logging.getLogger(component_name)

    try:
        color = get_config_value(f"logging.logging_colors.{component_name}") or "white"
    except ConfigurationError:
        color = "white"

    return ComponentLogger(base_logger, component_name, color)
