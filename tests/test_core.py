"""Tests for core.py"""

import asyncio

import pytest

from fake_sway import SHUTDOWN_EVENT, WINDOW_EVENT, FakeSway, raw_header, serve
from sway_autotile.core import (
    CommandError,
    SwayIPCConnection,
    TransportError,
    find_socket_path,
    pack,
    unpack_header,
)
from trees import con, root, workspace, workspaces


class TestFraming:
    def test_pack_header(self):
        data = pack(4, b"{}")
        assert data[:6] == b"i3-ipc"
        assert unpack_header(data[:14]) == (2, 4)
        assert data[14:] == b"{}"

    def test_bad_magic(self):
        with pytest.raises(TransportError):
            unpack_header(raw_header(b"xx-ipc", 0, 0))


class TestFindSocketPath:
    def test_prefers_swaysock(self, monkeypatch):
        monkeypatch.setenv("SWAYSOCK", "/run/sway.sock")
        monkeypatch.setenv("I3SOCK", "/run/i3.sock")
        assert find_socket_path() == "/run/sway.sock"

    def test_falls_back_to_i3sock(self, monkeypatch):
        monkeypatch.delenv("SWAYSOCK", raising=False)
        monkeypatch.setenv("I3SOCK", "/run/i3.sock")
        assert find_socket_path() == "/run/i3.sock"

    def test_no_socket(self, monkeypatch):
        monkeypatch.delenv("SWAYSOCK", raising=False)
        monkeypatch.delenv("I3SOCK", raising=False)
        with pytest.raises(TransportError):
            find_socket_path()


class TestSwayIPCConnection:
    @pytest.mark.asyncio
    async def test_queries(self):
        tree = root(workspace(1, con(focused=True)))
        fake = FakeSway(tree=tree, workspaces=workspaces(1, 1, 2))

        async with serve(fake) as path:
            ipc = SwayIPCConnection(path)
            try:
                assert await ipc.get_tree() == tree
                assert [w["num"] for w in await ipc.get_workspaces()] == [1, 2]
                assert (await ipc.get_version())["human_readable"] == "fake sway 1.0"
            finally:
                await ipc.close()

    @pytest.mark.asyncio
    async def test_run_command(self):
        fake = FakeSway(failing={"splitv"})

        async with serve(fake) as path:
            ipc = SwayIPCConnection(path)
            try:
                assert await ipc.run_command("splith") == [{"success": True}]
                with pytest.raises(CommandError) as exc_info:
                    await ipc.run_command("splitv")
            finally:
                await ipc.close()

        assert exc_info.value.command == "splitv"
        assert exc_info.value.error == "nope"
        assert fake.commands == ["splith", "splitv"]

    @pytest.mark.asyncio
    async def test_subscribe_yields_events_until_closed(self):
        events = [
            (WINDOW_EVENT, {"change": "focus", "container": con()}),
            (WINDOW_EVENT, {"change": "new", "container": con()}),
            (SHUTDOWN_EVENT, {"change": "exit"}),
        ]

        received = []
        async with serve(FakeSway(events=events)) as path:
            ipc = SwayIPCConnection(path)
            with pytest.raises(TransportError):
                async for event, change, _ in ipc.subscribe(["window", "shutdown"]):
                    received.append((event, change))
            await ipc.close()

        assert received == [("window", "focus"), ("window", "new"), ("shutdown", "exit")]

    @pytest.mark.asyncio
    async def test_subscribe_rejects_unknown_events(self):
        ipc = SwayIPCConnection("/nonexistent")
        with pytest.raises(ValueError):
            async for _ in ipc.subscribe(["windows"]):
                pass

    @pytest.mark.asyncio
    async def test_missing_socket(self):
        ipc = SwayIPCConnection("/nonexistent/sway.sock")
        with pytest.raises(TransportError):
            await ipc.get_tree()

    @pytest.mark.asyncio
    async def test_reconnects_after_failure(self):
        tree = root(workspace(1))

        async with serve(FakeSway(tree=tree)) as path:
            ipc = SwayIPCConnection(path)
            socket = ipc.sockets["get_tree"]
            assert await ipc.get_tree() == tree

            # the window manager drops the connection
            socket.writer.close()
            await asyncio.sleep(0)
            with pytest.raises(TransportError):
                await ipc.get_tree()
            assert socket.writer is None

            assert await ipc.get_tree() == tree
            await ipc.close()
