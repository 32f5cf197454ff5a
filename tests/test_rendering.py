import numpy as np
import pytest

from cadgeo_canvas import CanvasRenderer, CanvasView, InteractionController, Shape, ShapeKind, Tool
from cadgeo_engine import GeometryEngine, Point, Polygon, TransformParams


WHITE = (255, 255, 255)
GRID_BGR = (224, 224, 224)
OUTLINE_BGR = (51, 51, 51)
CENTROID_BGR = (107, 107, 255)


def pixel(frame, x, y):
    return tuple(int(c) for c in frame[y, x])


@pytest.fixture
def renderer():
    return CanvasRenderer(grid_spacing=20)


@pytest.fixture
def view():
    engine = GeometryEngine()
    controller = InteractionController(engine, lambda shape_id: None, lambda shape_id, patch: None)
    return CanvasView(engine, controller, size=(300, 200))


@pytest.fixture
def square():
    return Shape(id="sq", kind=ShapeKind.SQUARE, size=50,
                 transform=TransformParams(translate=Point(100, 100)))


def test_clear_returns_background_frame(renderer):
    frame = renderer.clear((600, 400))

    assert frame.shape == (400, 600, 3)
    assert frame.dtype == np.uint8
    assert (frame == 255).all()


def test_grid_lines_every_spacing(renderer):
    frame = renderer.draw_grid(renderer.clear((100, 60)))

    assert pixel(frame, 20, 5) == GRID_BGR
    assert pixel(frame, 5, 40) == GRID_BGR
    assert pixel(frame, 10, 5) == WHITE


def test_shape_is_filled_outlined_and_marked(renderer):
    engine = GeometryEngine()
    world = engine.world_polygon(engine.square(50), TransformParams(translate=Point(100, 100)))
    frame = renderer.clear((200, 200))

    frame = renderer.draw_shape(frame, world, engine.centroid(world))

    interior = pixel(frame, 85, 110)
    assert interior != WHITE
    assert all(200 < c < 255 for c in interior)
    assert pixel(frame, 75, 100) == OUTLINE_BGR
    assert pixel(frame, 100, 100) == CENTROID_BGR


def test_selected_shape_is_highlighted(renderer):
    engine = GeometryEngine()
    world = engine.world_polygon(engine.square(50), TransformParams(translate=Point(100, 100)))

    plain = renderer.draw_shape(renderer.clear((200, 200)), world, Point(100, 100))
    selected = renderer.draw_shape(renderer.clear((200, 200)), world, Point(100, 100), selected=True)

    blue, _, red = pixel(selected, 85, 110)
    assert blue > red
    assert pixel(plain, 85, 110) != pixel(selected, 85, 110)


def test_degenerate_polygons_do_not_break_drawing(renderer):
    frame = renderer.clear((50, 50))

    frame = renderer.draw_shape(frame, Polygon(()), Point(0, 0))
    frame = renderer.draw_shape(frame, Polygon.from_points([(5, 5), (40, 5)]), Point(22, 5))

    assert frame.shape == (50, 50, 3)


def test_invalid_grid_spacing_rejected():
    with pytest.raises(ValueError, match="grid_spacing"):
        CanvasRenderer(grid_spacing=0)


# ========== View ==========

def test_redraw_matches_surface_size(view, square):
    frame = view.redraw([square], selected_id="sq", show_grid=True)

    assert frame.shape == (200, 300, 3)
    assert pixel(frame, 100, 100) == CENTROID_BGR


def test_redraw_without_grid(view):
    frame = view.redraw([], show_grid=False)

    assert (frame == 255).all()


def test_redraw_is_idempotent(view, square):
    first = view.redraw([square], "sq", True)
    second = view.redraw([square], "sq", True)

    assert np.array_equal(first, second)


def test_resize_changes_next_frame(view):
    view.resize(120, 80)

    assert view.size == (120, 80)
    assert view.redraw([]).shape == (80, 120, 3)


def test_resize_rejects_non_positive_size(view):
    with pytest.raises(ValueError, match="positive"):
        view.resize(0, 100)


def test_pointer_events_use_surface_size_for_clamping(square):
    engine = GeometryEngine()
    shapes = [square]
    updates = []

    def update(shape_id, patch):
        updates.append(patch["transform"])

    controller = InteractionController(engine, lambda shape_id: None, update, throttle_ms=0)
    view = CanvasView(engine, controller, size=(150, 150))

    view.on_pointer_down(Point(100, 100), shapes, Tool.SELECT)
    view.on_pointer_move(Point(500, 100), shapes)
    view.on_pointer_up()

    assert updates[-1].translate.x == pytest.approx(150 - 10 - 25)
    assert not controller.is_dragging
