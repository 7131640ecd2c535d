"""
Dockspace Configuration
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .layouts.geometry import RESIZER_SIZE
from .objects import DockSlot


def _default_area_limits() -> Dict[DockSlot, Tuple[int, int]]:
    return {
        DockSlot.LEFT: (180, 500),
        DockSlot.RIGHT: (220, 520),
        DockSlot.BOTTOM: (120, 500),
    }


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() not in ("", "0", "false", "no")


@dataclass
class DockConfig:
    """Layout engine configuration."""

    # Size limits (min, max) applied when a dock area is resized by drag
    area_limits: Dict[DockSlot, Tuple[int, int]] = field(
        default_factory=_default_area_limits
    )

    # Range split ratios are clamped to when a split resizer is dragged
    split_ratio_range: Tuple[float, float] = (0.1, 0.9)

    # Resizer thickness between panes
    gap: int = RESIZER_SIZE

    # Slot used by open_tab when the caller names none
    default_slot: Union[DockSlot, str] = DockSlot.CENTER

    # Log every bus event
    debug: bool = field(default_factory=lambda: _env_flag("DOCKSPACE_DEBUG"))

    def __post_init__(self):
        """Normalize slot names and check limits."""
        self.default_slot = DockSlot(self.default_slot)
        self.area_limits = {
            DockSlot(slot): (low, high) for slot, (low, high) in self.area_limits.items()
        }
        for slot, (low, high) in self.area_limits.items():
            if low < 0 or low > high:
                raise ValueError(
                    f"Invalid size limits for {slot.value}: ({low}, {high})"
                )

        low, high = self.split_ratio_range
        if not 0 <= low <= high <= 1:
            raise ValueError(
                f"Invalid split ratio range: ({low}, {high}). Must lie within [0, 1]"
            )
        if self.gap < 0:
            raise ValueError(f"Invalid gap: {self.gap}")

    def limits_for(self, slot: DockSlot) -> Tuple[float, float]:
        """Size limits for a slot; unlimited when none are configured."""
        return self.area_limits.get(slot, (0, float("inf")))

    @classmethod
    def from_env(cls) -> "DockConfig":
        """Build a configuration from DOCKSPACE_* environment variables."""
        gap = os.getenv("DOCKSPACE_GAP")
        return cls(
            gap=int(gap) if gap else RESIZER_SIZE,
            debug=_env_flag("DOCKSPACE_DEBUG"),
        )
