"""
Unit tests for the MCP server helpers.
"""

import pytest

from dropbox_vfs import server
from dropbox_vfs.services.vfs.interface import NoInstanceError, VFSFile
from dropbox_vfs.services.vfs.manager import vfs_manager
from dropbox_vfs.services.vfs.paths import to_provider_path
from tests.conftest import make_file, make_folder, make_listing


class TestVirtualPath:
    """Tool arguments may be virtual or plain paths."""

    def test_virtual_path_kept(self):
        assert server._virtual("dropbox:///Docs") == "dropbox:///Docs"

    def test_plain_path_mounted_under_root(self):
        assert server._virtual("/Docs/a.txt") == "dropbox:///Docs/a.txt"
        assert server._virtual("Docs") == "dropbox:///Docs"

    def test_default_scandir_path_is_root(self):
        assert server._virtual("/") == "dropbox:///"
        assert to_provider_path(server._virtual("/")) == ""

    def test_plain_path_reaches_dropbox_unchanged(self):
        assert to_provider_path(server._virtual("/Docs/a.txt")) == "/Docs/a.txt"


class TestFormatListing:
    """Test the human-readable listing."""

    def test_empty(self):
        assert server._format_listing("dropbox:///", []).endswith("(empty)")

    def test_entries(self):
        text = server._format_listing("dropbox:///", [
            VFSFile(filename="Photos", path="dropbox:///Photos", type="dir"),
            VFSFile(filename="a.txt", path="dropbox:///a.txt", size=3, mime="text/plain"),
        ])
        assert "📁 Photos/" in text
        assert "📄 a.txt (3 bytes, text/plain)" in text


class TestCall:
    """Test routing a tool call through the module entry point."""

    @pytest.mark.asyncio
    async def test_routes_to_instance(self, monkeypatch, adapter, client):
        monkeypatch.setattr(vfs_manager, "_instance", adapter)
        client.files_list_folder.return_value = make_listing([make_folder("/Photos"), make_file("/a.txt")])

        error, entries = await server._call("scandir", "dropbox:///", {})

        assert error is None
        assert [e.filename for e in entries] == ["Photos", "a.txt"]

    @pytest.mark.asyncio
    async def test_no_instance(self, monkeypatch):
        async def no_instance():
            return None

        monkeypatch.setattr(vfs_manager, "get_instance", no_instance)

        error, result = await server._call("read", "dropbox:///a.txt")

        assert isinstance(error, NoInstanceError)
        assert result is None


class TestTools:
    """Test the tools end to end against the fake client."""

    @staticmethod
    def _tool(tool):
        # FastMCP wraps decorated functions in a Tool holding the original in .fn
        return getattr(tool, "fn", tool)

    @pytest.mark.asyncio
    async def test_write_reports_encoded_size(self, monkeypatch, adapter, client):
        monkeypatch.setattr(vfs_manager, "_instance", adapter)

        message = await self._tool(server.vfs_write)("/Docs/é.txt", "héllo")

        assert message == "✅ Written: dropbox:///Docs/é.txt (6 bytes)"
        args, _ = client.files_upload.call_args
        assert args == ("héllo".encode("utf-8"), "/Docs/é.txt")

    @pytest.mark.asyncio
    async def test_scandir_default_lists_dropbox_root(self, monkeypatch, adapter, client):
        monkeypatch.setattr(vfs_manager, "_instance", adapter)
        client.files_list_folder.return_value = make_listing([make_file("/a.txt", size=3)])

        text = await self._tool(server.vfs_scandir)()

        client.files_list_folder.assert_called_once_with("")
        assert text.startswith("📂 dropbox:///\n")
        assert "📄 a.txt (3 bytes, text/plain)" in text
