import argparse
import asyncio
import logging
from signal import SIGINT, SIGTERM

from sway_autotile import __version__
from sway_autotile.bootstrap import build_config, initialize_and_load
from sway_autotile.core import SwayIPCConnection, TransportError
from sway_autotile.handlers import Dispatcher, WindowChange
from sway_autotile.settings import MASTER_MAX, MASTER_MIN, AutotileConfig

logger = logging.getLogger(__name__)

SUBSCRIPTIONS = ["window", "shutdown"]


async def run_subscription_loop(
    config: AutotileConfig,
    ipc: SwayIPCConnection | None = None,
) -> int:
    """
    Subscribes to window events and hands every one of them to the dispatcher.
    Returns the exit code: 0 when the window manager shuts down or we are
    cancelled, 1 when the connection cannot be made or breaks.
    """
    if ipc is None:
        ipc = SwayIPCConnection()

    dispatcher = Dispatcher(ipc, config)
    try:
        version = await ipc.get_version()
        logger.info("Connected to %s", version.get("human_readable", "unknown"))

        async for event, change, payload in ipc.subscribe(SUBSCRIPTIONS):
            if event == "shutdown":
                logger.info("Window manager sent shutdown (%s), exiting", change)
                return 0
            if event == "window":
                await dispatcher.handle(WindowChange.parse(change), payload)
    except TransportError as e:
        logger.error("Lost the connection to the window manager: %s", e)
        return 1
    except asyncio.exceptions.CancelledError:
        return 0
    finally:
        await ipc.close()

    logger.error("Event stream ended unexpectedly")
    return 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sway-autotile",
        description="Switches the split orientation of sway/i3 containers so "
        "that new windows open close to square.",
    )
    parser.add_argument(
        "-w",
        "--workspace",
        type=int,
        action="append",
        dest="workspaces",
        help="only autotile this workspace, may be given more than once",
    )
    parser.add_argument(
        "--balance",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="balance siblings after a window opens or closes (default: on)",
    )
    parser.add_argument(
        "-m",
        "--master",
        action="append",
        dest="master_classes",
        metavar="CLASS",
        help="app_id or X11 class of a window to size as master, may be repeated",
    )
    parser.add_argument(
        "-p",
        "--master-size",
        type=float,
        help=f"size of master windows as a fraction or percent, clamped "
        f"to [{MASTER_MIN}, {MASTER_MAX}]",
    )
    parser.add_argument("-c", "--config", help="path to a settings.json")
    parser.add_argument("-s", "--socket", help="path to the IPC socket")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        settings = initialize_and_load(args.config)
    except (OSError, ValueError) as e:
        logger.error("Could not load settings: %s", e)
        return 1

    config = build_config(
        settings,
        workspaces=args.workspaces,
        balance=args.balance,
        master_classes=args.master_classes,
        master_size=args.master_size,
    )
    logger.debug("Running with %s", config)

    loop = asyncio.new_event_loop()
    task = loop.create_task(
        run_subscription_loop(config, SwayIPCConnection(args.socket))
    )
    loop.add_signal_handler(SIGINT, task.cancel)
    loop.add_signal_handler(SIGTERM, task.cancel)
    try:
        return loop.run_until_complete(task)
    finally:
        loop.close()
