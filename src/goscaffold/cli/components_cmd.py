"""Component listing command.

Shows which template paths belong to each optional component, so users can
see what ``create --with=...`` leaves out.
"""

import click
from rich.table import Table

from goscaffold.cli.components import COMPONENT_PATHS, DEFAULT_COMPONENTS

from .styles import Styles, get_console


@click.command()
def components():
    """List optional components and the template paths they own.

    Paths not listed here belong to no component and are always generated.
    """
    table = Table(title="Components", border_style=Styles.BORDER, header_style=Styles.HEADER)
    table.add_column("Component", style=Styles.ACCENT)
    table.add_column("Path prefixes", style=Styles.PATH)

    for name, prefixes in COMPONENT_PATHS.items():
        table.add_row(name, "\n".join(prefixes))

    console = get_console()
    console.print(table)
    console.print(f"Default selection: [accent]{DEFAULT_COMPONENTS}[/accent]")
