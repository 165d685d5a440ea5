import asyncio
import logging
import os
import sys
from collections import defaultdict
from typing import AsyncGenerator

import orjson

logger = logging.getLogger(__name__)

JSONValue = (
    bool
    | str
    | None
    | float
    | dict[str, "JSONInnerValue"]
    | list[dict[str, "JSONInnerValue"]]
)
JSONInnerValue = JSONValue | list[dict[str, JSONValue]]
JSONDict = dict[str, JSONValue]
JSONList = list[JSONDict]

magic_string = "i3-ipc"
magic_len = len(magic_string)
magic_enc = magic_string.encode()
payload_len_len = 4  # length of payload length
payload_type_len = 4  # length of payload type
header_len = magic_len + payload_len_len + payload_type_len

RUN_COMMAND = 0
GET_WORKSPACES = 1
SUBSCRIBE = 2
GET_TREE = 4
GET_VERSION = 7

_events = {
    0x80000000: "workspace",
    0x80000001: "output",
    0x80000002: "mode",
    0x80000003: "window",
    0x80000004: "barconfig_update",
    0x80000005: "binding",
    0x80000006: "shutdown",
    0x80000007: "tick",
    0x80000014: "bar_state_update",
    0x80000015: "input",
}


class SwayIPCError(Exception):
    """Base class for everything that goes wrong talking to the window manager."""


class TransportError(SwayIPCError, ConnectionError):
    """The socket is missing, closed, or returned something that is not IPC."""


class CommandError(SwayIPCError):
    def __init__(self, command: str, error: str):
        super().__init__(f"{command!r} failed: {error}")
        self.command = command
        self.error = error


def find_socket_path() -> str:
    for variable in ["SWAYSOCK", "I3SOCK"]:
        if socket_path := os.environ.get(variable):
            return socket_path
    raise TransportError("Could not find the socket, neither SWAYSOCK nor I3SOCK is set")


def pack(payload_type: int, payload: bytes = b"") -> bytes:
    data = magic_enc
    data += len(payload).to_bytes(payload_len_len, sys.byteorder)
    data += payload_type.to_bytes(payload_type_len, sys.byteorder)
    return data + payload


def unpack_header(header: bytes) -> tuple[int, int]:
    """Returns (payload length, payload type) of a message header."""
    if header[:magic_len] != magic_enc:
        raise TransportError(f"Invalid magic string in header: {header[:magic_len]!r}")

    payload_length_bytes = header[magic_len : magic_len + payload_len_len]
    payload_type_bytes = header[magic_len + payload_len_len : :]
    return (
        int.from_bytes(payload_length_bytes, sys.byteorder),
        int.from_bytes(payload_type_bytes, sys.byteorder),
    )


class SwayIPCSocket:
    def __init__(self, socket_path: str | None = None):
        self.socket_path = socket_path
        self.lock = asyncio.Lock()
        self.reader: asyncio.StreamReader = None  # pyright: ignore
        self.writer: asyncio.StreamWriter = None  # pyright: ignore

    async def connect(self):
        socket_path = self.socket_path or find_socket_path()
        try:
            self.reader, self.writer = await asyncio.open_unix_connection(
                path=socket_path
            )
        except OSError as e:
            raise TransportError(f"Could not connect to {socket_path}: {e}") from e

    async def send(self, payload_type: int, command=b""):
        if not self.writer:  # first time calling, create socket
            await self.connect()

        self.writer.write(pack(payload_type, command))
        await self.writer.drain()

    async def read_message(self) -> tuple[int, bytes]:
        try:
            header = await self.reader.readexactly(header_len)
            payload_length, payload_type = unpack_header(header)
            return payload_type, await self.reader.readexactly(payload_length)
        except asyncio.IncompleteReadError as e:
            raise TransportError("The socket was closed by the window manager") from e

    async def receive(self) -> JSONDict | JSONList:
        _, raw_response = await self.read_message()
        return orjson.loads(raw_response)

    async def receive_event(self) -> tuple[str, JSONDict]:
        event_int, raw_response = await self.read_message()
        event_human = _events.get(event_int, "unknown")
        try:
            return event_human, orjson.loads(raw_response)
        except orjson.JSONDecodeError as e:
            raise TransportError(f"Unreadable {event_human} event: {e}") from e

    async def close(self):
        if self.writer and not self.writer.is_closing():
            self.writer.close()
            try:
                await self.writer.wait_closed()
            except OSError:
                pass
        self.reader, self.writer = None, None  # pyright: ignore

    async def send_receive(self, payload_type: int, command=b"") -> JSONDict | JSONList:
        async with self.lock:  # ensure only one coroutine is in this block at a time
            try:
                await self.send(payload_type, command)
                return await self.receive()
            except (OSError, orjson.JSONDecodeError) as e:
                # drop the socket, the next request connects again
                await self.close()
                if isinstance(e, TransportError):
                    raise
                raise TransportError(f"Request of type {payload_type} failed: {e}") from e


class SwayIPCConnection:
    def __init__(self, socket_path: str | None = None) -> None:
        self.socket_path = socket_path
        self.sockets: defaultdict[str, SwayIPCSocket] = defaultdict(
            lambda: SwayIPCSocket(self.socket_path)
        )

    async def run_command(self, c: str) -> list[dict[str, bool | str]]:
        replies = await self.sockets["run_command"].send_receive(
            RUN_COMMAND, c.encode()
        )
        for reply in replies:
            if not reply.get("success"):
                raise CommandError(c, str(reply.get("error", "unknown error")))
        return replies  # pyright: ignore

    async def get_workspaces(self) -> JSONList:
        return await self.sockets["get_workspaces"].send_receive(GET_WORKSPACES)  # pyright:ignore

    async def get_tree(self) -> JSONDict:
        return await self.sockets["get_tree"].send_receive(GET_TREE)  # pyright:ignore

    async def get_version(self) -> JSONDict:
        return await self.sockets["get_version"].send_receive(GET_VERSION)  # pyright:ignore

    async def subscribe(
        self, events: list[str]
    ) -> AsyncGenerator[tuple[str, str, JSONDict], None]:
        if not all(r in _events.values() for r in events):
            raise ValueError(f"invalid payload: {events}")

        socket = self.sockets["subscribe"]
        reply = await socket.send_receive(SUBSCRIBE, orjson.dumps(events))
        if not reply.get("success"):  # pyright: ignore
            raise TransportError(f"Could not subscribe with {events}")
        logger.debug("Subscribed to %s", events)

        try:
            while True:
                event, payload = await socket.receive_event()
                yield event, payload.get("change", "run"), payload  # pyright: ignore
        except asyncio.exceptions.CancelledError:
            await self.close(["subscribe"])
            raise

    async def close(self, socket_names: list[str] | None = None):
        if socket_names is None:
            socket_names = list(self.sockets.keys())

        for name in socket_names:
            if (socket := self.sockets.pop(name, None)) is not None:
                await socket.close()
