"""The car's part tree: loading, navigating by zoom level and saving."""

from __future__ import annotations

import re
from os import PathLike
from typing import Iterable

from drvr.carpart import CarPart, Component

DEFAULT_OUTPUT = "test.txt"

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class NavigationError(LookupError):
    """Raised when there is no level to zoom in or out to."""


def _to_int(text: str) -> int:
    """Parse a leading integer the lenient way, giving 0 when there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


class _FieldReader:
    """Reads delimiter-terminated fields from the parts file text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def field(self, delimiter: str) -> str:
        end = self.text.find(delimiter, self.pos)
        if end == -1:
            value = self.text[self.pos:]
            self.pos = len(self.text)
            return value
        value = self.text[self.pos:end]
        self.pos = end + 1
        return value


class Car:
    """All the parts of a car, arranged as a tree, and the level being viewed."""

    def __init__(self) -> None:
        self.hierarchy: list[int] = []
        self.parts: list[CarPart] = []
        self.current_parts: list[CarPart] = []

    def load(self, path: str | PathLike[str]) -> None:
        """Read the parts file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            self.parse(handle.read())

    def parse(self, text: str) -> None:
        """Build the part tree from the text of a parts file.

        The first line holds the number of parts, the second the hierarchy
        numbers (how many children each part has, in depth-first order).
        Each part follows as ``name,image,count`` and then ``count`` lines of
        ``name,image,video,description``.
        """
        reader = _FieldReader(text)
        total = _to_int(reader.field("\n"))
        if total <= 0:
            raise ValueError("the parts file lists no parts")

        hierarchy = [
            _to_int(reader.field("\n" if i == total - 1 else ","))
            for i in range(total)
        ]

        parts: list[CarPart] = []
        for part_id in range(total):
            part = CarPart(part_id=part_id, top_node=part_id == 0)
            part.name = reader.field(",")
            part.image = reader.field(",")
            count = _to_int(reader.field("\n"))
            for _ in range(count):
                name = reader.field(",")
                image = reader.field(",")
                video = reader.field(",")
                description = reader.field("\n")
                part.add_component(Component(name, image, video, description))
            parts.append(part)

        for parent, child_count in enumerate(hierarchy):
            if child_count <= 0:
                continue
            siblings = list(self._children(hierarchy, parent))
            for child in siblings:
                parts[child].parent_id = parent
                parts[child].siblings = list(siblings)

        self.hierarchy = hierarchy
        self.parts = parts
        self.current_parts = [parts[0]]

    @staticmethod
    def _children(hierarchy: list[int], parent: int) -> Iterable[int]:
        """Yield the positions of the direct children of ``parent``."""
        child_count = hierarchy[parent]
        position = parent + 1
        for j in range(child_count):
            if position >= len(hierarchy):
                raise ValueError(
                    f"hierarchy numbers give part {parent} more children than there are parts"
                )
            yield position
            if hierarchy[position] > 0 and j == child_count - 1:
                continue
            if hierarchy[position] > 0:
                position += hierarchy[position] + 1
            else:
                position += 1

    def hierarchy_number(self, position: int) -> int:
        """Number of children of the part at ``position``; non-zero means it can be zoomed into."""
        if not 0 <= position < len(self.hierarchy):
            raise IndexError(f"part position {position} out of range")
        return self.hierarchy[position]

    def set_current_parts(self, ids: Iterable[int]) -> None:
        """Make the parts with the given ids the level being viewed."""
        self.current_parts = [self.parts[part_id] for part_id in ids]

    def zoom_in(self, position: int) -> None:
        """Show the children of the part at ``position``."""
        if self.hierarchy_number(position) == 0:
            raise NavigationError("There is nothing to zoom in to")
        self.set_current_parts(self.parts[position + 1].siblings)

    def zoom_out(self, position: int) -> None:
        """Show the level holding the parent of the part at ``position``."""
        parent = self.parts[position].parent_id
        if parent == -1:
            raise NavigationError("There is nothing to zoom out to")
        siblings = self.parts[parent].siblings or [parent]
        self.set_current_parts(siblings)

    def reset(self) -> None:
        """Return to the top level of the tree."""
        if not self.parts:
            raise ValueError("no parts have been loaded")
        top = self.parts[0]
        if top.siblings:
            self.set_current_parts(top.siblings)
        else:
            self.current_parts = [top]

    def dumps(self) -> str:
        """Render the whole tree in the parts file format."""
        text = f"{len(self.hierarchy)}\n"
        if self.hierarchy:
            text += ",".join(str(n) for n in self.hierarchy) + "\n"
        text += "\n".join(part.to_text() for part in self.parts)
        return text

    def write(self, path: str | PathLike[str] = DEFAULT_OUTPUT) -> None:
        """Save the tree to ``path`` in the parts file format."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.dumps())