"""goscaffold - Go service project generator.

Creates a new Go service project from the bundled template tree, rendering
project-specific values and including only the selected components.

This package contains:
- The template walk and rendering (goscaffold.cli.templates)
- Component selection rules (goscaffold.cli.components)
- The command-line interface (goscaffold.cli)
- Configuration and logging utilities (goscaffold.utils)
"""

# Version information
__version__ = "0.1.0"

__all__ = ["__version__"]
