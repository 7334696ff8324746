"""Calculator mode flags: angle unit, shift, theme, history panel."""

from dataclasses import dataclass, replace
from enum import Enum


class AngleUnit(str, Enum):
    DEGREES = "deg"
    RADIANS = "rad"

    def toggled(self) -> "AngleUnit":
        return AngleUnit.RADIANS if self is AngleUnit.DEGREES else AngleUnit.DEGREES


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True)
class ModeState:
    angle_unit: AngleUnit = AngleUnit.DEGREES
    shift: bool = False
    theme: Theme = Theme.DARK
    show_history: bool = False

    def toggle_angle_unit(self) -> "ModeState":
        return replace(self, angle_unit=self.angle_unit.toggled())

    def toggle_shift(self) -> "ModeState":
        return replace(self, shift=not self.shift)

    def toggle_theme(self) -> "ModeState":
        return replace(self, theme=self.theme.toggled())

    def toggle_history(self) -> "ModeState":
        return replace(self, show_history=not self.show_history)
