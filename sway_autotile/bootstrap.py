import logging
import os
from typing import Any

import orjson

from sway_autotile.settings import MASTER_DEFAULT, AutotileConfig

logger = logging.getLogger(__name__)

Settings = dict[str, Any]


def default_settings_path() -> str:
    return os.path.expanduser(
        os.path.join(
            os.getenv("XDG_CONFIG_HOME", "~/.config"),
            "sway-autotile",
            "settings.json",
        )
    )


def template_path() -> str:
    return os.path.join(os.path.dirname(__file__), "settings.json")


def load_settings(settings_path: str) -> Settings:
    with open(settings_path, "rb") as f:
        settings = orjson.loads(f.read())

    if not isinstance(settings, dict):
        raise ValueError(f"{settings_path} must contain a JSON object")

    workspaces = settings.get("workspaces", [])
    if not isinstance(workspaces, list) or not all(
        isinstance(w, int) for w in workspaces
    ):
        raise ValueError(f"workspaces must be a list of numbers, got {workspaces}")

    masters = settings.get("masters", {})
    if not isinstance(masters, dict) or not all(
        isinstance(f, (int, float)) for f in masters.values()
    ):
        raise ValueError(f"masters must map application classes to sizes, got {masters}")

    balance = settings.get("balance", True)
    if not isinstance(balance, bool):
        raise ValueError(f"balance must be true or false, got {balance!r}")

    return settings


def initialize_and_load(settings_path: str | None = None) -> Settings:
    """
    Reads the given settings file, or the one in the user's config directory.
    Falls back to the bundled defaults when the user has none.
    """
    if settings_path is None:
        settings_path = default_settings_path()
        if not os.path.exists(settings_path):
            logger.debug("No settings at %s, using defaults", settings_path)
            settings_path = template_path()
    if not os.path.exists(settings_path):
        raise FileNotFoundError(f"Path to file does not exist: {settings_path}")

    logger.debug("Loading settings from %s", settings_path)
    return load_settings(settings_path)


def build_config(
    settings: Settings,
    workspaces: list[int] | None = None,
    balance: bool | None = None,
    master_classes: list[str] | None = None,
    master_size: float | None = None,
) -> AutotileConfig:
    """Values given on the command line take precedence over the settings file."""
    masters: dict[str, float] = dict(settings.get("masters", {}))
    if master_classes:
        size = master_size if master_size is not None else MASTER_DEFAULT
        masters.update({app: size for app in master_classes})
    elif master_size is not None:
        masters = {app: master_size for app in masters}

    return AutotileConfig(
        workspaces=frozenset(
            workspaces if workspaces else settings.get("workspaces", [])
        ),
        balance=balance if balance is not None else settings.get("balance", True),
        masters=masters,
    )
