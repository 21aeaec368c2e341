"""Car parts and the components that describe them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass
class Component:
    """One clickable component of a car part."""

    name: str = ""
    image: str = ""
    video: str = ""
    description: str = ""

    def to_text(self) -> str:
        """Render the component as one line of the parts file."""
        return f"{self.name},{self.image},{self.video},{self.description}"


@dataclass
class CarPart:
    """A node of the car's part tree together with its components."""

    part_id: int = 0
    name: str = ""
    image: str = ""
    components: list[Component] = field(default_factory=list)
    parent_id: int = -1
    siblings: list[int] = field(default_factory=list)
    top_node: bool = False

    @property
    def component_count(self) -> int:
        """Number of components held by this part."""
        return len(self.components)

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self.components):
            raise IndexError(
                f"component position {position} out of range "
                f"for part {self.name!r} with {len(self.components)} components"
            )

    def add_component(self, component: Component) -> None:
        """Append a component to this part."""
        self.components.append(component)

    def remove_component(self, position: int) -> Component:
        """Remove and return the component at ``position``."""
        self._check_position(position)
        return self.components.pop(position)

    def edit_component(self, position: int, **kwargs: str) -> Component:
        """Replace fields (name, image, video, description) of one component."""
        self._check_position(position)
        updated = replace(self.components[position], **kwargs)
        self.components[position] = updated
        return updated

    def to_text(self) -> str:
        """Render the part as it appears in the parts file, without a trailing newline."""
        header = f"{self.name},{self.image},{self.component_count}"
        return "\n".join([header, *(c.to_text() for c in self.components)])

    def describe(self) -> str:
        """Return a human-readable description of the part and its components."""
        lines = [
            f"Part ID: {self.part_id}",
            f"Part name: {self.name}",
            f"Part image: {self.image}",
            f"Number of components: {self.component_count}",
        ]
        for number, component in enumerate(self.components):
            lines += [
                f"Component number: {number}",
                f"Component name: {component.name}",
                f"Component image: {component.image}",
                f"Component video: {component.video}",
                f"Component description: {component.description}",
            ]
        return "\n".join(lines) + "\n"