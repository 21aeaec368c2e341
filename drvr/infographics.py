"""Browsing the car's part tree one level at a time, with component buttons."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from os import PathLike

from drvr.car import Car
from drvr.carpart import CarPart
from drvr.editor import DEFAULT_PARTS_FILE

MAX_ROW = 7
TOP_ORIGIN = (47, 30)
BOTTOM_ORIGIN = (47, 431)
TOP_SHIFTED = (114, 30)
BOTTOM_SHIFTED = (114, 430)

# Which of the seven button slots (numbered from 1) a row of a given size uses.
_ROW_SLOTS: dict[int, tuple[int, ...]] = {
    1: (1,),
    2: (3, 4),
    3: (3, 4, 5),
    4: (2, 3, 4, 5),
    5: (2, 3, 4, 5, 6),
    6: (1, 2, 3, 4, 5, 6),
    7: (1, 2, 3, 4, 5, 6, 7),
}


class Row(enum.Enum):
    """The two rows of component buttons."""

    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Button:
    """A visible component button: its row, its slot in the row and its label."""

    row: Row
    slot: int
    label: str = ""


@dataclass(frozen=True)
class ButtonLayout:
    """Where the two button rows sit and which buttons are shown, in label order."""

    top_origin: tuple[int, int]
    bottom_origin: tuple[int, int]
    buttons: tuple[Button, ...]

    def row(self, row: Row) -> tuple[Button, ...]:
        """The buttons shown in one row."""
        return tuple(button for button in self.buttons if button.row is row)


def split_rows(count: int) -> tuple[int, int]:
    """Split ``count`` components into (top, bottom) row sizes."""
    if count < 0:
        raise ValueError(f"component count cannot be negative: {count}")
    if count < 4:
        return count, 0
    return count - count // 2, count // 2


def _row_buttons(row: Row, size: int) -> tuple[Button, ...]:
    return tuple(Button(row, slot) for slot in _ROW_SLOTS.get(size, ()))


def _shifted(size: int) -> bool:
    return size > 0 and size % 2 == 0


def button_slots(count: int) -> ButtonLayout:
    """Lay out unlabelled buttons for ``count`` components."""
    top, bottom = split_rows(count)
    if top == 1 or top > MAX_ROW or bottom > MAX_ROW:
        raise ValueError(f"no button layout for {count} components")
    return ButtonLayout(
        top_origin=TOP_SHIFTED if _shifted(top) else TOP_ORIGIN,
        bottom_origin=BOTTOM_SHIFTED if _shifted(bottom) else BOTTOM_ORIGIN,
        buttons=_row_buttons(Row.TOP, top) + _row_buttons(Row.BOTTOM, bottom),
    )


class Infographics:
    """The part being viewed within the current level of a car's part tree."""

    def __init__(self, car: Car | None = None) -> None:
        self.car = car if car is not None else Car()
        self.position = 0
        self.current: list[CarPart] = list(self.car.current_parts)

    @property
    def current_part(self) -> CarPart:
        """The part being viewed."""
        if not self.current:
            raise LookupError("no parts are loaded")
        return self.current[self.position]

    def load(self, path: str | PathLike[str] = DEFAULT_PARTS_FILE) -> None:
        """Load the parts file and view its top level."""
        self.car.load(path)
        self.position = 0
        self.current = list(self.car.current_parts)

    def zoom(self) -> bool:
        """Zoom into the children of the part being viewed; False if it has none."""
        part_id = self.current_part.part_id
        if self.car.hierarchy_number(part_id) == 0:
            return False
        self.car.zoom_in(part_id)
        self.position = 0
        self.current = list(self.car.current_parts)
        return True

    def next_part(self) -> CarPart:
        """Move to the next part of the level, wrapping round to the first."""
        if not self.current:
            raise LookupError("no parts are loaded")
        self.position = (self.position + 1) % len(self.current)
        return self.current[self.position]

    def prev_part(self) -> CarPart:
        """Move to the previous part of the level, wrapping round to the last."""
        if not self.current:
            raise LookupError("no parts are loaded")
        self.position = (self.position - 1) % len(self.current)
        return self.current[self.position]

    def reset(self) -> None:
        """Go back to the top level of the tree."""
        self.position = 0
        self.current = []
        self.car.reset()
        self.current = list(self.car.current_parts)

    def component_layout(self) -> ButtonLayout:
        """Buttons for the components of the part being viewed, labelled by name."""
        part = self.current_part
        layout = button_slots(part.component_count)
        labelled = tuple(
            replace(button, label=component.name)
            for button, component in zip(layout.buttons, part.components)
        )
        return replace(layout, buttons=labelled)