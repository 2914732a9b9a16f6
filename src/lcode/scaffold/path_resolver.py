"""Derive the canonical ``index.<ext>`` path for a fetched scaffold file."""

from typing import Callable, Optional

INDEX_BASENAME = "index"


def _split_directory(path: str) -> tuple[str, str]:
    cut = max(path.rfind("/"), path.rfind("\\")) + 1
    return path[:cut], path[cut:]


def _extension(filename: str) -> str:
    dot = filename.rfind(".")
    if dot <= 0:
        return ""
    return filename[dot:]


def resolve_output_path(
    raw_path: str, translate: Optional[Callable[[str], str]] = None,
) -> str:
    """Translate raw_path when a translator is given, then rename its base name to ``index``.

    The directory part and the extension are kept as they are. Both ``/`` and
    ``\\`` count as separators so translated Windows paths resolve the same way.
    """
    path = translate(raw_path) if translate is not None else raw_path
    directory, filename = _split_directory(path)
    return f"{directory}{INDEX_BASENAME}{_extension(filename)}"
