"""Click commands for showing and searching problems."""

import os
import sys

import click

from lcode.settings import LANGUAGES, SettingsStore
from lcode.show_cmd.orchestrator import SearchProblem, ShowDeps, ShowProblem, ShowStatus


def common_options(fn):
    fn = click.option(
        "--verbose", "-v", is_flag=True,
        help="Print the underlying cause when a command fails.",
    )(fn)
    fn = click.option(
        "--workspace", "-w",
        type=click.Path(file_okay=False),
        default=None,
        help="Workspace folder (default: enclosing git working tree or current directory).",
    )(fn)
    fn = click.option(
        "--config", "config_path",
        type=click.Path(dir_okay=False),
        envvar="LCODE_CONFIG",
        default=None,
        help="Settings file (default: lcode config in the user's app directory).",
    )(fn)
    return fn


def _build_deps(config_path, workspace, verbose):
    return ShowDeps(
        settings_store=SettingsStore(config_path),
        workspace_root=os.path.abspath(workspace) if workspace else None,
        verbose=verbose,
    )


def _exit_for(result):
    if result.status is ShowStatus.FAILED:
        sys.exit(1)


@click.command("show")
@click.argument("problem_id")
@click.option(
    "--language", "-l",
    type=click.Choice(LANGUAGES),
    default=None,
    help="Language of the scaffold (default: configured default, else prompt).",
)
@common_options
def show_cmd(problem_id, language, config_path, workspace, verbose):
    """Fetch a problem scaffold, normalize it, open it and build it."""
    deps = _build_deps(config_path, workspace, verbose)
    _exit_for(ShowProblem(deps).run(problem_id, language))


@click.command("search")
@click.option("--hide-locked", is_flag=True, help="Leave locked problems out of the list.")
@common_options
def search_cmd(hide_locked, config_path, workspace, verbose):
    """Choose a problem from the problem list and show it."""
    deps = _build_deps(config_path, workspace, verbose)
    search = SearchProblem(ShowProblem(deps), deps, show_locked=not hide_locked)
    _exit_for(search.run())
