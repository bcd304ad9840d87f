import pytest

from postip.components.screen_rect import ScreenRect
from postip.events.bus import EVENT_POINTER_WARPED, EventBus
from postip.systems.pointer_avoidance_system import PointerAvoidanceSystem
from tests.helpers import FakeFrame, FakePointer

RECT = ScreenRect(left=100, top=200, right=150, bottom=220)


def _avoid(pointer, frame, rect=RECT):
    system = PointerAvoidanceSystem(EventBus(), pointer)
    return system.avoid(rect, frame)


def test_pointer_inside_moves_to_nearest_edge():
    frame = FakeFrame()
    pointer = FakePointer(frame, 120, 210)

    moved = _avoid(pointer, frame)

    assert moved in {(98, 210), (151, 210), (120, 198), (120, 221)}
    # Bottom edge is closest: 220 - 210 = 10 vs top 11, left 21, right 30.
    assert moved == (120, 221)
    assert pointer.warps == [(frame, 120, 221)]


@pytest.mark.parametrize(
    "start, expected",
    [
        ((101, 210), (98, 210)),
        ((149, 210), (151, 210)),
        ((125, 201), (125, 198)),
        ((125, 219), (125, 221)),
    ],
)
def test_each_edge_can_win(start, expected):
    frame = FakeFrame()
    pointer = FakePointer(frame, *start)
    assert RECT.contains(*start)
    moved = _avoid(pointer, frame)
    assert moved == expected
    assert not RECT.contains(*moved)


def test_ties_prefer_left_then_right_then_top():
    frame = FakeFrame()
    square = ScreenRect(left=100, top=100, right=120, bottom=120)
    # dl = 110 - 100 + 1 = 11, dr = 10, dt = 11, db = 10: right wins over bottom.
    assert _avoid(FakePointer(frame, 110, 110), frame, square) == (121, 110)
    # dl = 10, dr = 11, dt = 10, db = 11: left wins over top.
    assert _avoid(FakePointer(frame, 109, 109), frame, square) == (98, 109)


def test_pointer_just_outside_is_still_nudged():
    frame = FakeFrame()
    pointer = FakePointer(frame, 99, 210)
    assert not RECT.contains(99, 210)
    # dl = 0 > -2, so the pointer is pushed further out to the left.
    assert _avoid(pointer, frame) == (98, 210)


def test_pointer_well_outside_is_left_alone():
    frame = FakeFrame()
    pointer = FakePointer(frame, 400, 400)
    assert _avoid(pointer, frame) is None
    assert pointer.warps == []


def test_edges_on_display_boundary_are_not_used():
    frame = FakeFrame(display_width=200, display_height=300)
    # Left edge at the display border, so the pointer must go right or vertically.
    rect = ScreenRect(left=0, top=100, right=60, bottom=200)
    pointer = FakePointer(frame, 50, 150)
    moved = _avoid(pointer, frame, rect)
    assert moved == (61, 150)
    assert 0 <= moved[0] < 200


def test_no_viable_edge_leaves_pointer():
    frame = FakeFrame(display_width=200, display_height=300)
    rect = ScreenRect(left=0, top=0, right=199, bottom=299)
    pointer = FakePointer(frame, 100, 100)
    assert _avoid(pointer, frame, rect) is None
    assert pointer.warps == []


def test_pointer_on_other_frame_is_ignored():
    frame = FakeFrame()
    pointer = FakePointer(FakeFrame(), 120, 210)
    assert _avoid(pointer, frame) is None
    assert pointer.warps == []


@pytest.mark.parametrize("x, y", [(None, 210), (120, None), ("120", 210), (True, 210)])
def test_non_numeric_pointer_is_ignored(x, y):
    frame = FakeFrame()
    pointer = FakePointer(frame, x, y)
    assert _avoid(pointer, frame) is None


def test_missing_pointer_is_ignored():
    frame = FakeFrame()
    assert _avoid(FakePointer(), frame) is None
    assert PointerAvoidanceSystem(EventBus(), None).avoid(RECT, frame) is None


def test_warp_is_announced_on_bus():
    bus = EventBus()
    frame = FakeFrame()
    events = []
    bus.subscribe(EVENT_POINTER_WARPED, lambda sender, **kw: events.append(kw))
    PointerAvoidanceSystem(bus, FakePointer(frame, 120, 210)).avoid(RECT, frame)
    assert events == [{"frame": frame, "x": 120, "y": 221, "from_x": 120, "from_y": 210}]
