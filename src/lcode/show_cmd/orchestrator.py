"""Show-problem orchestrator: language choice, fetch, rewrite, open, build."""

import os
import shlex
import subprocess
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, TextIO

import click

from lcode.errors import InvalidBuildCommandError, LeetCodeError
from lcode.executor import wsl
from lcode.executor.leetcode_executor import LeetCodeExecutor, extract_source_path
from lcode.picker.chooser import choose_pick
from lcode.picker.picks import to_picks
from lcode.scaffold.path_resolver import resolve_output_path
from lcode.scaffold.transformer import rewrite_scaffold_file
from lcode.settings import LANGUAGES, SettingsStore
from lcode.ui.menu import MenuConfig, choose_option
from lcode.workspace import find_workspace_root, problem_output_dir

FETCH_FAILED_MESSAGE = "Failed to fetch the problem information."
LIST_FAILED_MESSAGE = "Failed to list problems."

YES = "Yes"
NO = "No"
NEVER = "Never"

_FAILURES = (LeetCodeError, OSError, subprocess.CalledProcessError, click.ClickException)


class ShowStatus(Enum):
    OPENED = "opened"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class ShowResult:
    status: ShowStatus
    path: Optional[str] = None


def _default_editor_opener(path):
    click.edit(filename=path)


def _default_build_runner(cmd, cwd):
    return subprocess.run(cmd, cwd=cwd, check=True)


@dataclass
class ShowDeps:
    """Injectable collaborators for the show and search pipelines."""

    menu_config: MenuConfig = field(default_factory=MenuConfig)
    output: TextIO = None
    settings_store: SettingsStore = None
    executor: object = None
    workspace_root: str = None
    editor_opener: Callable = None
    build_runner: Callable = None
    path_translator: Optional[Callable[[str], str]] = None
    verbose: bool = False

    def __post_init__(self):
        if self.output is None:
            self.output = sys.stderr
        if self.settings_store is None:
            self.settings_store = SettingsStore()
        if self.workspace_root is None:
            self.workspace_root = find_workspace_root()
        if self.editor_opener is None:
            self.editor_opener = _default_editor_opener
        if self.build_runner is None:
            self.build_runner = _default_build_runner
        if self.executor is None:
            through_wsl = wsl.use_wsl(self.settings_store.load())
            self.executor = LeetCodeExecutor(use_wsl=through_wsl)
            if through_wsl and self.path_translator is None:
                self.path_translator = wsl.to_win_path


def build_command_for(template: str, problem_id: str) -> list[str]:
    """Split the configured build command, substituting {id}."""
    try:
        return shlex.split(template.replace("{id}", problem_id))
    except ValueError as exc:
        raise InvalidBuildCommandError(template, exc) from exc


class ShowProblem:

    def __init__(self, deps=None):
        self._deps = deps if deps is not None else ShowDeps()

    def run(self, problem_id, language=None) -> ShowResult:
        try:
            return self._run_guarded(problem_id, language)
        except KeyboardInterrupt:
            print("", file=self._deps.output)
            print("Interrupted.", file=self._deps.output)
            sys.exit(130)

    def _run_guarded(self, problem_id, language):
        try:
            return self._show(problem_id, language)
        except _FAILURES as exc:
            report_failure(FETCH_FAILED_MESSAGE, exc, self._deps)
            return ShowResult(ShowStatus.FAILED)

    def _show(self, problem_id, language):
        settings = self._deps.settings_store.load()
        default_language = settings.valid_default_language
        language = language or default_language or self._prompt_language()
        if language is None:
            return ShowResult(ShowStatus.CANCELLED)

        out_dir = problem_output_dir(self._deps.workspace_root, problem_id)
        print(f"Fetching problem {problem_id} ({language})...", file=self._deps.output)
        result = self._deps.executor.show_problem(problem_id, language, out_dir)

        file_path = self._place_scaffold(extract_source_path(result))
        metadata = rewrite_scaffold_file(file_path)
        print(f"[{metadata.id}] {metadata.title} ({metadata.difficulty})", file=self._deps.output)
        print(f"Opening {file_path}", file=self._deps.output)
        self._deps.editor_opener(file_path)
        self._build(problem_id, settings.build_command)

        if not default_language and settings.show_set_default_language_hint:
            self._offer_default_language(language)
        return ShowResult(ShowStatus.OPENED, file_path)

    def _prompt_language(self):
        return choose_option(
            "Select the language you want to use", list(LANGUAGES),
            config=self._deps.menu_config,
        )

    def _place_scaffold(self, raw_path):
        translate = self._deps.path_translator
        source_path = translate(raw_path) if translate is not None else raw_path
        target_path = resolve_output_path(source_path)
        if source_path != target_path:
            os.replace(source_path, target_path)
        return target_path

    def _build(self, problem_id, build_command):
        cmd = build_command_for(build_command, problem_id)
        if not cmd:
            return
        print(f"Running {' '.join(cmd)}", file=self._deps.output)
        self._deps.build_runner(cmd, self._deps.workspace_root)

    def _offer_default_language(self, language):
        choice = choose_option(
            f"Would you like to set '{language}' as your default language?",
            [YES, NO, NEVER], config=self._deps.menu_config,
        )
        if choice == YES:
            self._deps.settings_store.update(default_language=language)
        elif choice == NEVER:
            self._deps.settings_store.update(show_set_default_language_hint=False)


class SearchProblem:
    """List problems, let the user choose one, then show it."""

    def __init__(self, show: ShowProblem, deps: ShowDeps, show_locked=True):
        self._show = show
        self._deps = deps
        self._show_locked = show_locked

    def run(self) -> ShowResult:
        try:
            return self._search()
        except KeyboardInterrupt:
            print("", file=self._deps.output)
            print("Interrupted.", file=self._deps.output)
            sys.exit(130)

    def _search(self):
        try:
            problems = self._deps.executor.list_problems(show_locked=self._show_locked)
        except _FAILURES as exc:
            report_failure(LIST_FAILED_MESSAGE, exc, self._deps)
            return ShowResult(ShowStatus.FAILED)

        problem_id = choose_pick(to_picks(problems), config=self._deps.menu_config)
        if problem_id is None:
            return ShowResult(ShowStatus.CANCELLED)
        return self._show.run(problem_id)


def report_failure(message, exc, deps):
    """Print the uniform failure message; the cause only in verbose mode."""
    if deps.verbose:
        print(message, file=deps.output)
        print(f"  {type(exc).__name__}: {exc}", file=deps.output)
    else:
        print(f"{message} Re-run with --verbose for details.", file=deps.output)
