from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

MASTER_MIN = 0.5
MASTER_MAX = 0.7
MASTER_DEFAULT = 0.6


def clamp_master_fraction(value: float) -> float:
    """
    Accepts a fraction (0.6) or a percentage (60) and clamps it into
    [MASTER_MIN, MASTER_MAX].
    """
    if value > 1:
        value /= 100
    return min(MASTER_MAX, max(MASTER_MIN, value))


@dataclass(frozen=True)
class AutotileConfig:
    """
    Read only configuration built once at startup.
    An empty `workspaces` set means every workspace is eligible.
    """

    workspaces: frozenset[int] = frozenset()
    balance: bool = True
    masters: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "workspaces", frozenset(self.workspaces))
        object.__setattr__(
            self,
            "masters",
            MappingProxyType(
                {app: clamp_master_fraction(f) for app, f in self.masters.items()}
            ),
        )
