"""Centralized color and style management for the goscaffold CLI.

Design Philosophy:
- Semantic color names (success, error, warning) rather than direct colors
- Theme-based approach allowing the palette to come from configuration
- Rich console markup helpers for inline styling
"""

import sys
from dataclasses import dataclass, fields

from rich.color import Color, ColorParseError
from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.theme import Theme

from goscaffold.errors import ConfigurationError
from goscaffold.utils.logger import get_logger

logger = get_logger("cli")


# ============================================================================
# THEME CONFIGURATION
# ============================================================================


@dataclass
class ColorTheme:
    """Defines a complete color theme for the CLI.

    Error, warning and success colors follow UI conventions; the remaining
    colors give the CLI its look and may be overridden from configuration.
    """

    error: str = "#ff0000"
    warning: str = "#ffaa00"
    success: str = "#00af87"

    primary: str = "#00add8"  # Go gopher blue
    accent: str = "#5dc9e2"
    command: str = "#ce3262"
    path: str = "#a2ae9d"
    info: str = "#5dc9e2"

    text_secondary: str = "#888888"
    text_dim: str = "#666666"
    border_default: str = "#555555"

    def __post_init__(self):
        """Calculate derived colors from theme colors."""
        self.header = self.primary
        # Only #rrggbb colors have a brightness to adjust
        if len(self.primary) == 7 and self.primary.startswith("#"):
            self.subheader = self._adjust_brightness(self.primary, 0.85)
        else:
            self.subheader = self.primary

    @staticmethod
    def _adjust_brightness(hex_color: str, factor: float) -> str:
        """Adjust brightness of a hex color by a factor.

        Args:
            hex_color: Hex color string (e.g., "#ff0000")
            factor: Brightness multiplier (0.0-1.0 darkens, >1.0 lightens)

        Returns:
            Adjusted hex color string
        """
        hex_color = hex_color.lstrip("#")
        r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
        r = max(0, min(255, int(r * factor)))
        g = max(0, min(255, int(g * factor)))
        b = max(0, min(255, int(b * factor)))
        return f"#{r:02x}{g:02x}{b:02x}"


DEFAULT_THEME = ColorTheme()

# Plain terminal colors for terminals without truecolor support
BASIC_THEME = ColorTheme(
    error="red",
    warning="yellow",
    success="green",
    primary="blue",
    accent="cyan",
    command="magenta",
    path="white",
    info="cyan",
    text_secondary="bright_black",
    text_dim="bright_black",
    border_default="bright_black",
)

THEME_REGISTRY = {
    "default": DEFAULT_THEME,
    "basic": BASIC_THEME,
}


# ============================================================================
# ACTIVE THEME MANAGEMENT
# ============================================================================

_active_theme = DEFAULT_THEME


def _build_rich_theme(theme: ColorTheme) -> Theme:
    """Build a Rich Theme from a ColorTheme."""
    return Theme(
        {
            "success": f"bold {theme.success}",
            "error": f"bold {theme.error}",
            "warning": f"bold {theme.warning}",
            "info": f"bold {theme.info}",
            "primary": f"bold {theme.primary}",
            "secondary": theme.text_secondary,
            "dim": theme.text_dim,
            "header": f"bold {theme.header}",
            "subheader": f"bold {theme.subheader}",
            "label": "bold",
            "value": theme.success,
            "path": theme.path,
            "command": theme.command,
            "accent": theme.accent,
            "border": theme.border_default,
        }
    )


def _build_console(theme: ColorTheme) -> Console:
    # On Windows, force UTF-8 capable output for the status symbols
    if sys.platform == "win32":
        return Console(theme=_build_rich_theme(theme), force_terminal=True, legacy_windows=False)
    return Console(theme=_build_rich_theme(theme))


def get_active_theme() -> ColorTheme:
    """Get the currently active color theme."""
    return _active_theme


def set_theme(theme: ColorTheme):
    """Set a new active theme and rebuild the console.

    Args:
        theme: The ColorTheme to activate
    """
    global _active_theme, console
    _active_theme = theme
    console = _build_console(theme)


def _is_valid_color(value) -> bool:
    """Check that a theme value is a color Rich can parse."""
    if not isinstance(value, str):
        return False
    try:
        Color.parse(value)
    except ColorParseError:
        return False
    return True


def load_theme_from_config(config_path: str | None = None) -> ColorTheme:
    """Load the theme named by ``cli.theme`` in the configuration.

    ``cli.theme: custom`` builds a theme from the ``cli.custom_theme``
    mapping; unknown names and invalid colors fall back to the default.

    Args:
        config_path: Optional path to config file (uses default if None)

    Returns:
        The selected ColorTheme
    """
    from goscaffold.utils.config import get_config_value

    theme_name = get_config_value("cli.theme", "default", config_path)

    if theme_name == "custom":
        custom_colors = get_config_value("cli.custom_theme", {}, config_path) or {}
        if not isinstance(custom_colors, dict):
            logger.warning("cli.custom_theme must be a mapping, using default")
            return DEFAULT_THEME
        known = {f.name for f in fields(ColorTheme)}
        for key, value in custom_colors.items():
            if key not in known or not _is_valid_color(value):
                logger.warning(f"Invalid custom theme entry {key}: {value}, using default")
                return DEFAULT_THEME
        return ColorTheme(**custom_colors)

    theme = THEME_REGISTRY.get(theme_name)
    if theme is None:
        logger.warning(f"Unknown theme '{theme_name}', using default")
        theme = DEFAULT_THEME
    return theme


def initialize_theme_from_config(config_path: str | None = None):
    """Initialize and apply theme from configuration.

    An unreadable configuration leaves the default theme in place; the
    command that needs the configuration reports the problem.
    """
    try:
        set_theme(load_theme_from_config(config_path))
    except ConfigurationError as e:
        logger.debug(f"Failed to load theme from config: {e}, using default")
        set_theme(DEFAULT_THEME)
    except (ValueError, StyleSyntaxError) as e:
        logger.warning(f"Invalid theme colors: {e}, using default")
        set_theme(DEFAULT_THEME)


# ============================================================================
# CONSOLE INSTANCE
# ============================================================================

console = _build_console(_active_theme)


def get_console() -> Console:
    """Return the console for the active theme."""
    return console


# ============================================================================
# STYLE HELPERS
# ============================================================================


class Styles:
    """Style names defined in the Rich theme."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    BOLD = "bold"
    DIM = "dim"
    PRIMARY = "primary"
    SECONDARY = "secondary"

    HEADER = "header"
    SUBHEADER = "subheader"
    LABEL = "label"
    VALUE = "value"
    PATH = "path"
    COMMAND = "command"
    ACCENT = "accent"
    BORDER = "border"


class Messages:
    """Pre-formatted message helpers for common patterns."""

    @staticmethod
    def success(text: str) -> str:
        """Format a success message with checkmark."""
        return f"[success]✓ {text}[/success]"

    @staticmethod
    def error(text: str) -> str:
        """Format an error message with X mark."""
        return f"[error]✗ {text}[/error]"

    @staticmethod
    def label_value(label: str, value: str) -> str:
        """Format a label-value pair."""
        return f"[label]{label}:[/label] [value]{value}[/value]"

    @staticmethod
    def command(text: str) -> str:
        """Format a command string."""
        return f"[command]{text}[/command]"

    @staticmethod
    def path(text: str) -> str:
        """Format a file path."""
        return f"[path]{text}[/path]"


__all__ = [
    "ColorTheme",
    "DEFAULT_THEME",
    "BASIC_THEME",
    "THEME_REGISTRY",
    "get_active_theme",
    "set_theme",
    "load_theme_from_config",
    "initialize_theme_from_config",
    "console",
    "get_console",
    "Styles",
    "Messages",
]
