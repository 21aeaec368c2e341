import pytest

from drvr.carpart import CarPart, Component


def _part_with_components():
    part = CarPart(part_id=3, name="Engine", image="engine.png")
    part.add_component(Component("Piston", "piston.png", "piston.mp4", "Moves up, and down"))
    part.add_component(Component("Valve", "valve.png", "valve.mp4", "Lets air in"))
    return part


def test_new_part_defaults():
    part = CarPart()
    assert part.parent_id == -1
    assert part.component_count == 0
    assert part.top_node is False


def test_to_text_without_components_has_single_line():
    part = CarPart(name="Engine", image="engine.png")
    assert part.to_text() == "Engine,engine.png,0"


def test_to_text_with_components():
    part = _part_with_components()
    lines = part.to_text().split("\n")
    assert len(lines) == 1 + part.component_count
    assert lines[0] == f"Engine,engine.png,{part.component_count}"
    assert lines[1] == "Piston,piston.png,piston.mp4,Moves up, and down"
    assert not part.to_text().endswith("\n")


def test_add_component_increments_count():
    part = CarPart()
    part.add_component(Component(name="Wheel"))
    assert part.component_count == 1
    assert part.components[0].name == "Wheel"


def test_remove_component_returns_removed():
    part = _part_with_components()
    removed = part.remove_component(0)
    assert removed.name == "Piston"
    assert [c.name for c in part.components] == ["Valve"]


@pytest.mark.parametrize("position", [-1, 2, 10])
def test_remove_component_out_of_range(position):
    part = _part_with_components()
    with pytest.raises(IndexError):
        part.remove_component(position)


def test_edit_component_changes_only_given_fields():
    part = _part_with_components()
    part.edit_component(1, image="new.png", description="Controls flow")
    valve = part.components[1]
    assert valve.image == "new.png"
    assert valve.description == "Controls flow"
    assert valve.name == "Valve"
    assert valve.video == "valve.mp4"


def test_edit_component_unknown_field():
    part = _part_with_components()
    with pytest.raises(TypeError):
        part.edit_component(0, colour="red")


def test_edit_component_out_of_range():
    part = CarPart()
    with pytest.raises(IndexError):
        part.edit_component(0, name="x")


def test_describe_lists_part_and_components():
    part = _part_with_components()
    text = part.describe()
    assert "Part ID: 3\n" in text
    assert "Part name: Engine\n" in text
    assert "Component number: 1\nComponent name: Valve\n" in text
    assert text.count("Component number:") == part.component_count