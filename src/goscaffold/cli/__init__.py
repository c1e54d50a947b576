"""Command-line interface for goscaffold.

Commands:
    - create: Generate a new Go service project from the bundled templates
    - components: List optional components and the paths they own

Architecture:
    Uses Click for command-line parsing with a group-based structure.
    Each command is implemented in its own module and lazy-loaded.
"""

from .main import cli, main

__all__ = ["cli", "main"]
