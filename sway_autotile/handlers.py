import logging
from enum import Enum

from sway_autotile.commands import LayoutCommand, ResizeTo
from sway_autotile.core import SwayIPCConnection, SwayIPCError
from sway_autotile.data_types import WindowEvent
from sway_autotile.layout import decide, decide_master
from sway_autotile.settings import AutotileConfig

logger = logging.getLogger(__name__)


class WindowChange(str, Enum):
    FOCUS = "focus"
    NEW = "new"
    CLOSE = "close"
    OTHER = "other"

    @classmethod
    def parse(cls, change: str) -> "WindowChange":
        try:
            return cls(change)
        except ValueError:
            return cls.OTHER


class Dispatcher:
    """
    Handles one window event at a time. Every event gets a fresh tree, the
    geometry in the event payload is stale by the time it arrives
    (https://github.com/swaywm/sway/issues/5873).
    """

    def __init__(self, ipc: SwayIPCConnection, config: AutotileConfig):
        self.ipc = ipc
        self.config = config

    async def handle(self, change: WindowChange, payload: WindowEvent) -> list[str]:
        """Returns the commands that were run for the event."""
        done: list[str] = []
        try:
            match change:
                case WindowChange.FOCUS:
                    await self.switch_splitting(done)
                case WindowChange.NEW:
                    await self.switch_splitting(done, master=True)
                    await self.balance(done)
                case WindowChange.CLOSE:
                    await self.balance(done)
                case WindowChange.OTHER:
                    pass
        except (SwayIPCError, OSError, ValueError, KeyError, TypeError) as e:
            container = payload.get("container") or {}
            logger.error(
                "Handling %s of container %s failed: %s",
                change.value,
                container.get("id"),  # pyright: ignore
                e,
            )
        return done

    async def switch_splitting(self, done: list[str], master: bool = False):
        workspaces = await self.ipc.get_workspaces() if self.config.workspaces else []
        tree = await self.ipc.get_tree()

        if (command := decide(tree, workspaces, self.config)) != LayoutCommand.NOOP:
            await self.run(command, done)

        if master and (resize := decide_master(tree, workspaces, self.config)):
            await self.run(resize, done)

    async def balance(self, done: list[str]):
        if self.config.balance:
            await self.run(LayoutCommand.BALANCE, done)

    async def run(self, command: LayoutCommand | ResizeTo, done: list[str]):
        logger.debug("Running %s", command)
        await self.ipc.run_command(str(command))
        done.append(str(command))
