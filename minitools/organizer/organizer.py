"""Move the files under a directory into sorted destination directories."""

import os
from pathlib import Path

from minitools.organizer.sorter import SortMode, get_dest_dir


def _walk_files(top):
    """Yield every regular file under ``top``, skipping anything unreadable."""
    if os.path.isfile(top):
        yield top
        return
    try:
        with os.scandir(top) as it:
            entries = list(it)
    except OSError:
        return
    for entry in entries:
        if entry.is_file(follow_symlinks=False):
            yield entry.path
        elif entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)


def organize_files(path, mode, dry_run):
    """Move each file under ``path`` into its destination directory.

    With ``dry_run`` nothing is moved and each planned move is printed.
    Returns the ``(source, destination directory)`` pairs in walk order.
    """
    mode = SortMode(mode)
    moves = []
    for src in _walk_files(os.fspath(path)):
        dest_dir = get_dest_dir(src, mode)
        if dry_run:
            print(f'Would move "{src}" -> "{dest_dir}"')
        else:
            dest_dir.mkdir(parents=True, exist_ok=True)
            os.rename(src, dest_dir / os.path.basename(src))
        moves.append((Path(src), dest_dir))
    return moves