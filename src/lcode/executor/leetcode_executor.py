"""LeetCodeExecutor: wraps the external `leetcode` CLI used to fetch and list problems."""

import re
import subprocess
from typing import List, Optional

from lcode.errors import ExecutorError, FetchResultUnparsableError
from lcode.executor import wsl
from lcode.picker.picks import ProblemState, ProblemSummary

_SOURCE_CODE_RE = re.compile(r'\* Source Code:\s*(.*)')
_PROBLEM_LINE_RE = re.compile(
    r'^(.)\s(.{1,2})\s(.)\s\[\s*(\d*)\s*\]\s*(.*)\s*(Easy|Medium|Hard)\s*\((\s*\d+\.\d+ %)\)'
)

_ACCEPTED_MARKS = ("\u2714", "\u221a")
_NOT_ACCEPTED_MARKS = ("\u2718", "\u00d7")


def extract_source_path(output: str) -> str:
    """Return the path on the executor's '* Source Code: <path>' line.

    Raises:
        FetchResultUnparsableError: If no such line carries a path.
    """
    match = _SOURCE_CODE_RE.search(output)
    if match is None or not match.group(1).strip():
        raise FetchResultUnparsableError(output)
    return match.group(1).strip()


def parse_problem_state(mark: str) -> ProblemState:
    if mark in _ACCEPTED_MARKS:
        return ProblemState.ACCEPTED
    if mark in _NOT_ACCEPTED_MARKS:
        return ProblemState.NOT_ACCEPTED
    return ProblemState.UNKNOWN


def parse_problem_list(output: str) -> List[ProblemSummary]:
    """Parse `leetcode list` output into summaries; unrecognized lines are skipped."""
    problems = []
    for line in output.split("\n"):
        match = _PROBLEM_LINE_RE.match(line)
        if match is None:
            continue
        problems.append(ProblemSummary(
            id=match.group(4).strip(),
            name=match.group(5).strip(),
            state=parse_problem_state(match.group(3)),
            locked=bool(match.group(2).strip()),
            pass_rate=match.group(7).strip(),
            difficulty=match.group(6).strip(),
            is_favorite=bool(match.group(1).strip()),
        ))
    return problems


class LeetCodeExecutor:
    """Runs the `leetcode` CLI, optionally through WSL.

    All subprocess calls go through _run() for consistency.
    """

    def __init__(self, binary: str = "leetcode", use_wsl: bool = False):
        self._binary = binary
        self._use_wsl = use_wsl

    def _command(self, args):
        cmd = [self._binary] + list(args)
        if self._use_wsl:
            return ["wsl"] + cmd
        return cmd

    def _run(self, args) -> str:
        cmd = self._command(args)
        result = subprocess.run(cmd, capture_output=True, text=True)
        if result.returncode != 0:
            raise ExecutorError(cmd, result.returncode, result.stderr)
        return result.stdout

    def _out_dir_arg(self, out_dir: str) -> str:
        if self._use_wsl:
            return wsl.to_wsl_path(out_dir)
        return out_dir

    def show_problem(self, problem_id: str, language: str, out_dir: str) -> str:
        """Generate the scaffold for problem_id in out_dir and return the CLI output."""
        return self._run([
            "show", problem_id, "-gx",
            "-l", language,
            "-o", self._out_dir_arg(out_dir),
        ])

    def list_problems(self, show_locked: bool = True, query: Optional[str] = None) -> List[ProblemSummary]:
        args = ["list"]
        if not show_locked:
            args.append("-q")
            args.append("L")
        if query:
            args.append(query)
        return parse_problem_list(self._run(args))
