"""Exception hierarchy for problem fetching and scaffold rewriting."""


class LeetCodeError(Exception):
    """Base class for failures that abort a show-problem pipeline."""


class MalformedScaffoldError(LeetCodeError):
    """The fetched scaffold header lacks a title line, URL line or difficulty."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Scaffold header is missing: {', '.join(self.missing)}")


class FetchResultUnparsableError(LeetCodeError):
    """The executor output has no '* Source Code: <path>' line."""

    def __init__(self, output):
        self.output = output
        super().__init__("Executor output does not contain a source code path")


class ExecutorError(LeetCodeError):
    """The external leetcode executor exited with a non-zero status."""

    def __init__(self, cmd, returncode, stderr=""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(f"{cmd[0]} exited with status {returncode}{detail}")


class UnreadableScaffoldError(LeetCodeError):
    """The fetched scaffold is not valid UTF-8 text."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot decode scaffold {path}: {reason}")


class InvalidBuildCommandError(LeetCodeError):
    """The configured build_command cannot be split into arguments."""

    def __init__(self, command, reason):
        self.command = command
        super().__init__(f"Invalid build_command {command!r}: {reason}")
