from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from mdrun.lib.errors import DocumentNotFoundError

FALLBACK_NAME = "README.md"


def candidate_names(program_name: str, extra_names: Sequence[str] = ()) -> list[str]:
    """Document file names in priority order."""
    return [f"{program_name}.md", f".{program_name}.md", *extra_names, FALLBACK_NAME]


def find_document(
    program_name: str,
    start: Optional[Path] = None,
    extra_names: Sequence[str] = (),
) -> Path:
    """Search upwards from `start` (or cwd) for the document to run.

    In each directory, names are compared case-insensitively and the
    highest-priority candidate present wins. The nearest directory with
    any candidate is used. Raises `DocumentNotFoundError` when none is
    found before reaching the filesystem root.
    """
    names = candidate_names(program_name, extra_names)
    wanted = {name.lower(): rank for rank, name in enumerate(reversed(names))}

    cur = (start or Path.cwd()).resolve()
    for directory in [cur] + list(cur.parents):
        best: Optional[Path] = None
        best_rank = -1
        try:
            entries = list(directory.iterdir())
        except OSError:
            continue
        for entry in entries:
            rank = wanted.get(entry.name.lower(), -1)
            if rank > best_rank and entry.is_file():
                best, best_rank = entry, rank
        if best is not None:
            return best

    raise DocumentNotFoundError(names)
