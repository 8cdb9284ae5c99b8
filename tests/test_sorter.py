import os
from datetime import datetime
from pathlib import Path

import pytest

from minitools.organizer.sorter import SortMode, get_dest_dir


@pytest.mark.parametrize(
    "name, ext",
    [
        ("report.txt", "txt"),
        ("archive.tar.gz", "gz"),
        ("dir/photo.JPG", "JPG"),
    ],
)
def test_extension_dir_uses_last_suffix(name, ext):
    assert get_dest_dir(name, SortMode.EXTENSION) == Path("sorted") / ext


@pytest.mark.parametrize("name", ["Makefile", ".bashrc", "dir/README"])
def test_files_without_extension_go_to_unknown(name):
    assert get_dest_dir(name, SortMode.EXTENSION) == Path("sorted") / "unknown"


def test_mode_may_be_given_as_string():
    assert get_dest_dir("a.md", "extension") == get_dest_dir("a.md", SortMode.EXTENSION)


def test_extension_mode_does_not_touch_the_filesystem(tmp_path):
    missing = tmp_path / "nothing.here.csv"
    assert get_dest_dir(missing, SortMode.EXTENSION) == Path("sorted") / "csv"


def test_date_dir_uses_year_and_month_name(tmp_path):
    target = tmp_path / "note.txt"
    target.write_text("x")
    stamp = datetime(2020, 3, 15, 12, 0, 0).timestamp()
    os.utime(target, (stamp, stamp))
    assert get_dest_dir(target, SortMode.DATE) == Path("sorted") / "2020" / "March"


def test_date_dir_of_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        get_dest_dir(tmp_path / "gone.txt", SortMode.DATE)


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        get_dest_dir("a.txt", "size")