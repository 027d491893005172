"""
tablegraph CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import build, edit, extract, init, inspect, tree


@click.group()
@click.version_option(package_name="tablegraph")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """tablegraph: CSV <-> Webflow table node graphs.

    Builds XscpData clipboard JSON for tables and reads it back into
    rows and columns for editing.

    \b
    Quick Start:
      tablegraph build --csv data.csv -o table.json
      tablegraph extract table.json --format csv
      tablegraph tree table.json --search td
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(build.build)
main.add_command(extract.extract)
main.add_command(edit.edit)
main.add_command(tree.tree)
main.add_command(inspect.inspect)
main.add_command(init)

if __name__ == "__main__":
    main()
