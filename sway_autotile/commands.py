from dataclasses import dataclass
from enum import Enum


class LayoutCommand(str, Enum):
    """The values are the command strings sway and i3 understand."""

    SPLITH = "splith"
    SPLITV = "splitv"
    BALANCE = "balance"
    NOOP = "nop"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ResizeTo:
    """Gives the container `con_id` a `fraction` of its parent along the split axis."""

    con_id: int
    fraction: float
    orientation: LayoutCommand = LayoutCommand.SPLITH

    def __str__(self) -> str:
        axis = "height" if self.orientation == LayoutCommand.SPLITV else "width"
        return f"[con_id={self.con_id}] resize set {axis} {round(self.fraction * 100)} ppt"
