import math
from dataclasses import replace

import pytest

from cadgeo_canvas import InteractionController, Shape, ShapeKind, Tool
from cadgeo_engine import GeometryEngine, Point, TransformParams


SURFACE = (400, 400)


class Shell:
    """Minimal shell: owns the shapes and applies callbacks."""

    def __init__(self, shapes):
        self.shapes = list(shapes)
        self.selections = []
        self.updates = []

    def select(self, shape_id):
        self.selections.append(shape_id)

    def update(self, shape_id, patch):
        self.updates.append((shape_id, patch))
        self.shapes = [replace(s, **patch) if s.id == shape_id else s for s in self.shapes]

    def get(self, shape_id):
        return next(s for s in self.shapes if s.id == shape_id)


def square_at(shape_id, x, y, size=50.0):
    return Shape(id=shape_id, kind=ShapeKind.SQUARE, size=size,
                 transform=TransformParams(translate=Point(x, y)))


@pytest.fixture
def shell():
    return Shell([square_at("a", 200, 200)])


@pytest.fixture
def controller(shell, clock):
    return InteractionController(
        GeometryEngine(),
        on_shape_select=shell.select,
        on_shape_update=shell.update,
        clock=clock,
    )


# ========== Pointer down ==========

def test_pointer_down_on_shape_selects_and_starts_session(controller, shell):
    hit = controller.pointer_down(Point(210, 205), shell.shapes, Tool.SELECT)

    assert hit == "a"
    assert shell.selections == ["a"]
    assert controller.is_dragging
    assert controller.session.anchor_offset == Point(10, 5)


def test_pointer_down_on_empty_canvas_clears_selection(controller, shell):
    hit = controller.pointer_down(Point(10, 10), shell.shapes)

    assert hit is None
    assert shell.selections == [None]
    assert not controller.is_dragging


def test_topmost_shape_wins(controller):
    shell = Shell([square_at("bottom", 200, 200), square_at("top", 210, 210)])

    hit = controller.pointer_down(Point(205, 205), shell.shapes)

    assert hit == "top"


def test_hit_testing_uses_transformed_shape(controller):
    rotated = Shape(id="r", kind=ShapeKind.SQUARE, size=20,
                    transform=TransformParams(translate=Point(100, 100), rotate=math.pi / 4))

    # Corner region of the unrotated square is empty after rotation
    assert controller.hit_test(Point(109, 109), [rotated]) is None
    assert controller.hit_test(Point(113, 100), [rotated]).id == "r"


# ========== Select tool ==========

def test_drag_keeps_grab_offset(controller, shell):
    controller.pointer_down(Point(210, 205), shell.shapes, Tool.SELECT)

    params = controller.pointer_move(Point(300, 305), shell.shapes, SURFACE)

    assert params.translate == Point(290, 300)
    assert shell.get("a").transform.translate == Point(290, 300)
    assert shell.updates == [("a", {"transform": params})]


def test_drag_is_clamped_inside_margin(controller, shell):
    controller.pointer_down(Point(200, 200), shell.shapes, Tool.SELECT)

    params = controller.pointer_move(Point(500, -100), shell.shapes, SURFACE)

    # half size 25, margin 10
    assert params.translate.x == pytest.approx(400 - 10 - 25)
    assert params.translate.y == pytest.approx(10 + 25)


def test_shape_larger_than_surface_is_pinned_to_low_margin(controller, clock):
    shell = Shell([square_at("big", 200, 200, size=500)])
    controller.on_shape_update = shell.update
    controller.pointer_down(Point(200, 200), shell.shapes, Tool.SELECT)

    params = controller.pointer_move(Point(250, 250), shell.shapes, SURFACE)

    assert params.translate.x == pytest.approx(10 + 250)
    assert params.translate.y == pytest.approx(10 + 250)


# ========== Rotate tool ==========

def test_rotate_uses_absolute_angle_to_pointer(controller, shell):
    controller.pointer_down(Point(210, 200), shell.shapes, Tool.ROTATE)

    params = controller.pointer_move(Point(200, 300), shell.shapes, SURFACE)

    assert params.rotate == pytest.approx(math.pi / 2)
    assert params.translate == Point(200, 200)


# ========== Scale tool ==========

@pytest.fixture
def big_square_shell():
    return Shell([square_at("s", 200, 200, size=120)])


def scale_controller(shell, clock):
    return InteractionController(GeometryEngine(), shell.select, shell.update, clock=clock)


def test_scale_is_ratio_of_distances(big_square_shell, clock):
    controller = scale_controller(big_square_shell, clock)
    controller.pointer_down(Point(250, 200), big_square_shell.shapes, Tool.SCALE)

    params = controller.pointer_move(Point(350, 200), big_square_shell.shapes, SURFACE)

    assert controller.session.initial_scale_distance == pytest.approx(50.0)
    assert params.scale.x == pytest.approx(3.0)
    assert params.scale.y == pytest.approx(3.0)


@pytest.mark.parametrize("pointer, expected", [
    (Point(600, 200), 5.0),
    (Point(201, 200), 0.1),
])
def test_scale_is_clamped(big_square_shell, clock, pointer, expected):
    controller = scale_controller(big_square_shell, clock)
    controller.pointer_down(Point(250, 200), big_square_shell.shapes, Tool.SCALE)

    params = controller.pointer_move(pointer, big_square_shell.shapes, SURFACE)

    assert params.scale == Point(expected, expected)


def test_scale_from_center_is_ignored(big_square_shell, clock):
    controller = scale_controller(big_square_shell, clock)
    controller.pointer_down(Point(200, 200), big_square_shell.shapes, Tool.SCALE)

    assert controller.pointer_move(Point(300, 200), big_square_shell.shapes, SURFACE) is None
    assert big_square_shell.updates == []


# ========== Throttle ==========

def test_first_move_is_never_throttled(controller, shell):
    controller.pointer_down(Point(200, 200), shell.shapes)

    assert controller.pointer_move(Point(201, 200), shell.shapes, SURFACE) is not None


def test_moves_inside_throttle_window_are_dropped(controller, shell, clock):
    controller.pointer_down(Point(200, 200), shell.shapes)
    controller.pointer_move(Point(201, 200), shell.shapes, SURFACE)

    clock.advance_ms(5)
    assert controller.pointer_move(Point(220, 200), shell.shapes, SURFACE) is None

    clock.advance_ms(15)
    assert controller.pointer_move(Point(230, 200), shell.shapes, SURFACE) is not None
    assert len(shell.updates) == 2


def test_zero_throttle_applies_every_move(shell, clock):
    controller = InteractionController(GeometryEngine(), shell.select, shell.update,
                                       throttle_ms=0, clock=clock)
    controller.pointer_down(Point(200, 200), shell.shapes)

    for x in range(201, 206):
        controller.pointer_move(Point(x, 200), shell.shapes, SURFACE)

    assert len(shell.updates) == 5


# ========== Session end ==========

@pytest.mark.parametrize("end", ["pointer_up", "pointer_leave"])
def test_session_ends_on_release(controller, shell, end):
    controller.pointer_down(Point(200, 200), shell.shapes)

    getattr(controller, end)()

    assert not controller.is_dragging
    assert controller.pointer_move(Point(250, 250), shell.shapes, SURFACE) is None
    assert shell.updates == []


def test_move_while_idle_is_ignored(controller, shell):
    assert controller.pointer_move(Point(250, 250), shell.shapes, SURFACE) is None


def test_deleted_shape_ends_session(controller, shell):
    controller.pointer_down(Point(200, 200), shell.shapes)

    result = controller.pointer_move(Point(250, 250), [], SURFACE)

    assert result is None
    assert not controller.is_dragging
    assert shell.updates == []


def test_forget_shape_drops_matching_session_only(controller, shell):
    controller.pointer_down(Point(200, 200), shell.shapes)

    controller.forget_shape("other")
    assert controller.is_dragging

    controller.forget_shape("a")
    assert not controller.is_dragging


def test_invalid_scale_bounds_rejected():
    with pytest.raises(ValueError, match="min_scale"):
        InteractionController(GeometryEngine(), print, print, min_scale=2.0, max_scale=1.0)
