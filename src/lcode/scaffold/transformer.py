"""Scaffold transformer: scan a scaffold's header block and append its metadata.

The header is every line before the ``@lc code=start`` marker (or the whole
file when the marker is absent). Each header line is stripped of its comment
decoration and checked, in order, for the title line, the URL line and the
difficulty token. The first hit of each wins.
"""

import re
from dataclasses import dataclass
from typing import Optional

from lcode.errors import MalformedScaffoldError, UnreadableScaffoldError
from lcode.templates.template_renderer import render_template

DIFFICULTIES = ("Easy", "Medium", "Hard")

_CODE_START_MARKER = "@lc code=start"
_COMMENT_PREFIX_RE = re.compile(r'^\s*(?:/\*\*|/\*|\*/|\*|#|//|--|%)?\s*')
_TITLE_RE = re.compile(r'^\[(\d+)\]\.?\s*(.*?)\s*$')
_URL_RE = re.compile(r'https://\S+')
_DIFFICULTY_RE = re.compile(r'\b(' + '|'.join(DIFFICULTIES) + r')\b')

_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass(frozen=True)
class ScaffoldMetadata:
    id: str
    title: str
    url: str
    difficulty: str


def js_string(value: str) -> str:
    """Render value as a single-quoted JavaScript string literal."""
    return "'" + "".join(_JS_ESCAPES.get(ch, ch) for ch in value) + "'"


def _header_lines(content: str) -> list[str]:
    lines = content.splitlines()
    for i, line in enumerate(lines):
        if _CODE_START_MARKER in line:
            return lines[:i]
    return lines


def _strip_decoration(line: str) -> str:
    return _COMMENT_PREFIX_RE.sub("", line, count=1).rstrip()


def _match_title(line: str) -> Optional[tuple[str, str]]:
    match = _TITLE_RE.match(line)
    if match is None or not match.group(2):
        return None
    return match.group(1), match.group(2)


def parse_header(content: str) -> ScaffoldMetadata:
    """Extract the problem metadata from a scaffold's header block.

    Raises:
        MalformedScaffoldError: If the title line, URL line or difficulty
            token cannot be found. All missing elements are reported.
    """
    title = url = difficulty = None

    for line in map(_strip_decoration, _header_lines(content)):
        if title is None:
            title = _match_title(line)
            if title is not None:
                continue
        if url is None:
            url_match = _URL_RE.search(line)
            if url_match is not None:
                url = url_match.group(0)
                continue
        if difficulty is None:
            difficulty_match = _DIFFICULTY_RE.search(line)
            if difficulty_match is not None:
                difficulty = difficulty_match.group(1)

    missing = [
        name for name, value in
        (("title line", title), ("url line", url), ("difficulty", difficulty))
        if value is None
    ]
    if missing:
        raise MalformedScaffoldError(missing)

    problem_id, problem_title = title
    return ScaffoldMetadata(
        id=problem_id, title=problem_title, url=url, difficulty=difficulty,
    )


def render_metadata_block(metadata: ScaffoldMetadata) -> str:
    return render_template(
        "metadata_block.j2",
        package=__package__,
        filters={"js_string": js_string},
        id=metadata.id,
        title=metadata.title,
        url=metadata.url,
        difficulty=metadata.difficulty,
    )


def normalize(content: str) -> str:
    """Return content with a ``module.exports`` metadata block appended.

    The original content is kept byte for byte as the prefix of the result.
    """
    return content + render_metadata_block(parse_header(content))


def rewrite_scaffold_file(path: str) -> ScaffoldMetadata:
    """Normalize the scaffold at path in place and return its metadata."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
    except UnicodeDecodeError as exc:
        raise UnreadableScaffoldError(path, exc) from exc
    metadata = parse_header(content)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content + render_metadata_block(metadata))
    return metadata
