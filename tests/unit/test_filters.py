"""
Unit tests for scandir filtering.
"""

from dropbox_vfs.services.vfs.filters import ScandirOptions, filter_scandir
from dropbox_vfs.services.vfs.interface import VFSFile


def _entries():
    return [
        VFSFile(filename="..", path="dropbox:///", type="dir"),
        VFSFile(filename="Photos", path="dropbox:///Photos", type="dir"),
        VFSFile(filename="notes.txt", path="dropbox:///notes.txt", size=5, mime="text/plain"),
        VFSFile(filename=".hidden", path="dropbox:///.hidden", size=1, mime="application/octet-stream"),
        VFSFile(filename="cat.png", path="dropbox:///cat.png", size=9, mime="image/png"),
        VFSFile(filename=".config", path="dropbox:///.config", type="dir"),
    ]


def _names(entries):
    return [e.filename for e in entries]


class TestDefaults:
    """Test filtering with no options."""

    def test_keeps_order_and_drops_backlink(self):
        result = filter_scandir(_entries())
        assert _names(result) == ["Photos", "notes.txt", ".hidden", "cat.png", ".config"]

    def test_backlink_kept_when_asked(self):
        result = filter_scandir(_entries(), {"backlink": True})
        assert _names(result)[0] == ".."


class TestTypeFilter:
    """Test restricting to one entry type."""

    def test_files_only(self):
        result = filter_scandir(_entries(), {"typeFilter": "file"})
        assert _names(result) == ["notes.txt", ".hidden", "cat.png"]

    def test_dirs_only(self):
        result = filter_scandir(_entries(), ScandirOptions(type_filter="dir"))
        assert _names(result) == ["Photos", ".config"]


class TestHiddenFiles:
    """Test dot-file handling."""

    def test_hidden_removed(self):
        result = filter_scandir(_entries(), {"showHiddenFiles": False})
        assert _names(result) == ["Photos", "notes.txt", "cat.png"]

    def test_snake_case_keys_accepted(self):
        result = filter_scandir(_entries(), {"show_hidden_files": False})
        assert ".hidden" not in _names(result)


class TestMimeFilter:
    """Test MIME pattern filtering."""

    def test_only_matching_files_kept(self):
        result = filter_scandir(_entries(), {"mimeFilter": ["^image/"]})
        assert _names(result) == ["Photos", "cat.png", ".config"]

    def test_any_pattern_matches(self):
        result = filter_scandir(_entries(), {"mimeFilter": ["^image/", "^text/"]})
        assert "notes.txt" in _names(result)
        assert "cat.png" in _names(result)

    def test_directories_ignore_mime_filter(self):
        result = filter_scandir(_entries(), {"mimeFilter": ["^video/"]})
        assert _names(result) == ["Photos", ".config"]
