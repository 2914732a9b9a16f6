"""Workspace folder resolution and per-problem output directories."""

import os

from git import InvalidGitRepositoryError, NoSuchPathError, Repo


def find_workspace_root(start=None) -> str:
    """Return the working tree of the git repository containing start.

    Falls back to start itself (default: the current directory) when it is
    not inside a git working tree.
    """
    start = os.path.abspath(start or os.getcwd())
    try:
        repo = Repo(start, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return start
    if repo.working_tree_dir is None:
        return start
    return str(repo.working_tree_dir)


def problem_output_dir(workspace_root: str, problem_id: str) -> str:
    """<workspace>/src/<id>, created if missing."""
    out_dir = os.path.join(workspace_root, "src", problem_id)
    os.makedirs(out_dir, exist_ok=True)
    return out_dir
