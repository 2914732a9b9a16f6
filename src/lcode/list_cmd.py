"""Click command for listing problems."""

import sys

import click

from lcode.errors import LeetCodeError
from lcode.executor import wsl
from lcode.executor.leetcode_executor import LeetCodeExecutor
from lcode.picker.picks import to_pick
from lcode.settings import SettingsStore

FAVORITE_MARK = "★ "


def _format_problem_table(problems):
    """Format problems as aligned columnar output, favourites marked."""
    if not problems:
        return ""
    picks = [to_pick(problem) for problem in problems]
    label_width = max(len(pick.label) for pick in picks)
    mark_width = len(FAVORITE_MARK)
    lines = []
    for problem, pick in zip(problems, picks):
        mark = FAVORITE_MARK if problem.is_favorite else " " * mark_width
        lines.append(f"{mark}{pick.label:<{label_width}}  {pick.detail}")
    return "\n".join(lines)


@click.command("list")
@click.argument("query", required=False)
@click.option("--hide-locked", is_flag=True, help="Leave locked problems out of the list.")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    envvar="LCODE_CONFIG",
    default=None,
    help="Settings file (default: lcode config in the user's app directory).",
)
def list_cmd(query, hide_locked, config_path):
    """List problems with their status, AC rate and difficulty.

    QUERY is passed to `leetcode list` to narrow the list by keyword.
    """
    settings = SettingsStore(config_path).load()
    executor = LeetCodeExecutor(use_wsl=wsl.use_wsl(settings))
    try:
        problems = executor.list_problems(show_locked=not hide_locked, query=query)
    except KeyboardInterrupt:
        click.echo("", err=True)
        click.echo("Interrupted.", err=True)
        sys.exit(130)
    except (LeetCodeError, OSError) as exc:
        click.echo(f"Failed to list problems: {exc}", err=True)
        sys.exit(1)
    output = _format_problem_table(problems)
    if output:
        click.echo(output)
