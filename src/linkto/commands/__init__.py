"""Subcommand modules for linkto.

register_commands() imports lazily so ``linkto --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from linkto.commands.current import current
    from linkto.commands.link import link
    from linkto.commands.url import url

    cli.add_command(link)
    cli.add_command(url)
    cli.add_command(current)
