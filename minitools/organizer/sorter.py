"""Choose the destination directory for a file being organised."""

from __future__ import annotations

import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Union

_MONTHS = (
    "January February March April May June July "
    "August September October November December"
).split()


class SortMode(str, Enum):
    """How files are grouped into directories."""

    EXTENSION = "extension"
    DATE = "date"


def get_dest_dir(path: Union[str, "os.PathLike[str]"], mode: Union[SortMode, str]) -> Path:
    """Return ``sorted/<ext>`` or ``sorted/<year>/<month>`` for ``path``.

    Files without an extension go to ``sorted/unknown``; the date is the local
    modification time. Raises ``OSError`` for the date of a missing file.
    """
    if SortMode(mode) is SortMode.EXTENSION:
        name = Path(path).name
        stem, dot, ext = name.rpartition(".")
        if not dot or not stem or name == "..":
            ext = "unknown"
        return Path("sorted") / ext
    modified = datetime.fromtimestamp(os.stat(path).st_mtime)
    return Path("sorted") / f"{modified.year:04d}" / _MONTHS[modified.month - 1]