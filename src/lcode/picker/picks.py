"""Problem summaries and their projection onto chooser entries."""

from dataclasses import dataclass
from enum import Enum


class ProblemState(Enum):
    ACCEPTED = "accepted"
    NOT_ACCEPTED = "not_accepted"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ProblemSummary:
    id: str
    name: str
    state: ProblemState
    locked: bool
    pass_rate: str
    difficulty: str
    is_favorite: bool = False


@dataclass(frozen=True)
class SelectionItem:
    label: str
    description: str
    detail: str
    value: str


ACCEPTED_GLYPH = "✔ "
NOT_ACCEPTED_GLYPH = "✘ "
LOCKED_GLYPH = "🔒 "


def problem_decorator(state: ProblemState, locked: bool) -> str:
    if state is ProblemState.ACCEPTED:
        return ACCEPTED_GLYPH
    if state is ProblemState.NOT_ACCEPTED:
        return NOT_ACCEPTED_GLYPH
    return LOCKED_GLYPH if locked else ""


def to_pick(problem: ProblemSummary) -> SelectionItem:
    return SelectionItem(
        label=f"{problem_decorator(problem.state, problem.locked)}{problem.id}.{problem.name}",
        description="",
        detail=f"AC rate: {problem.pass_rate}, Difficulty: {problem.difficulty}",
        value=problem.id,
    )


def to_picks(problems) -> list[SelectionItem]:
    """Map problems 1:1 onto chooser entries, preserving their order."""
    return [to_pick(problem) for problem in problems]
