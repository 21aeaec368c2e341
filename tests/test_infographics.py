import pytest

from drvr.car import Car
from drvr.infographics import (
    BOTTOM_ORIGIN,
    TOP_ORIGIN,
    TOP_SHIFTED,
    Infographics,
    Row,
    button_slots,
    split_rows,
)

PARTS = (
    "3\n2,0,0\n"
    "Car,car.png,0\n"
    "Engine,engine.png,2\n"
    "Piston,p.png,p.mp4,moves\n"
    "Valve,v.png,v.mp4,opens\n"
    "Wheel,wheel.png,3\n"
    "Tyre,t.png,t.mp4,rubber\n"
    "Rim,r.png,r.mp4,metal\n"
    "Hub,h.png,h.mp4,centre"
)


@pytest.fixture
def viewer(tmp_path):
    path = tmp_path / "parts.txt"
    path.write_text(PARTS, encoding="utf-8")
    info = Infographics()
    info.load(path)
    return info


@pytest.mark.parametrize("count", range(0, 15))
def test_split_rows_invariants(count):
    top, bottom = split_rows(count)
    assert top + bottom == count
    assert top - bottom in ((0, 1) if count >= 4 else (count,))


def test_split_rows_small_counts_use_top_row_only():
    assert split_rows(3) == (3, 0)


def test_split_rows_negative():
    with pytest.raises(ValueError):
        split_rows(-1)


@pytest.mark.parametrize("count", [0, *range(2, 15)])
def test_button_slots_count_and_range(count):
    layout = button_slots(count)
    assert len(layout.buttons) == count
    assert all(1 <= b.slot <= 7 for b in layout.buttons)
    top, bottom = split_rows(count)
    assert len(layout.row(Row.TOP)) == top
    assert len(layout.row(Row.BOTTOM)) == bottom


def test_button_slots_two_components_centred():
    layout = button_slots(2)
    assert [b.slot for b in layout.buttons] == [3, 4]
    assert layout.top_origin == TOP_SHIFTED
    assert layout.bottom_origin == BOTTOM_ORIGIN


def test_button_slots_odd_row_not_shifted():
    layout = button_slots(3)
    assert layout.top_origin == TOP_ORIGIN


@pytest.mark.parametrize("count", [1, 15, 20])
def test_button_slots_unsupported(count):
    with pytest.raises(ValueError):
        button_slots(count)


def test_load_shows_top_part(viewer):
    assert viewer.current_part.name == "Car"
    assert viewer.component_layout().buttons == ()


def test_zoom_and_labels(viewer):
    assert viewer.zoom() is True
    assert [p.name for p in viewer.current] == ["Engine", "Wheel"]
    layout = viewer.component_layout()
    assert [b.label for b in layout.buttons] == ["Piston", "Valve"]


def test_zoom_on_leaf_does_nothing(viewer):
    viewer.zoom()
    assert viewer.zoom() is False
    assert viewer.current_part.name == "Engine"


def test_next_and_prev_wrap(viewer):
    viewer.zoom()
    assert viewer.next_part().name == "Wheel"
    assert [b.label for b in viewer.component_layout().buttons] == ["Tyre", "Rim", "Hub"]
    assert viewer.next_part().name == "Engine"
    assert viewer.prev_part().name == "Wheel"
    assert viewer.position == 1


def test_reset_returns_to_top(viewer):
    viewer.zoom()
    viewer.next_part()
    viewer.reset()
    assert viewer.position == 0
    assert [p.name for p in viewer.current] == ["Car"]


def test_empty_viewer_raises():
    info = Infographics(Car())
    with pytest.raises(LookupError):
        info.next_part()
    with pytest.raises(LookupError):
        info.component_layout()