"""Top-level Click group for the lcode CLI."""

import click

from lcode.list_cmd import list_cmd
from lcode.show_cmd.cli import search_cmd, show_cmd


@click.group()
def main():
    """lcode - fetch LeetCode problem scaffolds into your workspace."""


main.add_command(show_cmd)
main.add_command(search_cmd)
main.add_command(list_cmd)
