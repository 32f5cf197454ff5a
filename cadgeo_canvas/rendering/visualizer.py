"""
Canvas Visualizer Module
========================

Pure visualization layer for the canvas surface.

Design:
- Stateless rendering (every call paints a fresh frame)
- No business logic: receives world polygons, draws them
- Configurable styles
- Uses supervision drawing utilities

Dependencies:
- supervision (draw utilities, Color, Point)
- numpy (frames, vertex arrays)
"""

import numpy as np
import supervision as sv
from typing import Tuple

from cadgeo_engine import Point, Polygon
from cadgeo_engine.geometry.primitives import circle


class CanvasRenderer:
    """
    Stateless renderer for canvas frames.

    Frames are H×W×3 uint8 arrays in BGR order, the layout supervision
    (and OpenCV underneath it) draws into.

    Usage:
        renderer = CanvasRenderer(grid_spacing=20)

        frame = renderer.clear((600, 400))
        frame = renderer.draw_grid(frame)
        frame = renderer.draw_shape(frame, world_polygon, centroid, selected=True)
    """

    def __init__(
        self,
        background_color: sv.Color = sv.Color(r=255, g=255, b=255),
        grid_color: sv.Color = sv.Color(r=224, g=224, b=224),
        shape_color: sv.Color = sv.Color(r=51, g=51, b=51),
        selected_color: sv.Color = sv.Color(r=100, g=108, b=255),
        centroid_color: sv.Color = sv.Color(r=255, g=107, b=107),
        grid_spacing: int = 20,
        thickness: int = 2,
        selected_thickness: int = 3,
        fill_opacity: float = 0.1,
        selected_fill_opacity: float = 0.2,
        centroid_radius: float = 3.0,
    ):
        """
        Initialize renderer with style configuration.

        Args:
            background_color: Color the frame is cleared to
            grid_color: Grid line color
            shape_color: Outline/fill color of unselected shapes
            selected_color: Outline/fill color of the selected shape
            centroid_color: Centroid marker color
            grid_spacing: Distance between grid lines in pixels
            thickness: Outline thickness for unselected shapes
            selected_thickness: Outline thickness for the selected shape
            fill_opacity: Fill opacity for unselected shapes (0-1)
            selected_fill_opacity: Fill opacity for the selected shape (0-1)
            centroid_radius: Radius of the centroid marker
        """
        if grid_spacing <= 0:
            raise ValueError(f"grid_spacing must be > 0, got {grid_spacing}")

        self.background_color = background_color
        self.grid_color = grid_color
        self.shape_color = shape_color
        self.selected_color = selected_color
        self.centroid_color = centroid_color
        self.grid_spacing = grid_spacing
        self.thickness = thickness
        self.selected_thickness = selected_thickness
        self.fill_opacity = fill_opacity
        self.selected_fill_opacity = selected_fill_opacity
        self.centroid_radius = centroid_radius

    def clear(self, size: Tuple[int, int]) -> np.ndarray:
        """
        Fresh frame filled with the background color.

        Args:
            size: (width, height) in pixels
        """
        width, height = size
        return np.full((height, width, 3), self.background_color.as_bgr(), dtype=np.uint8)

    def draw_grid(self, frame: np.ndarray) -> np.ndarray:
        """Vertical and horizontal lines every grid_spacing pixels."""
        height, width = frame.shape[:2]

        for x in range(0, width + 1, self.grid_spacing):
            frame = sv.draw_line(
                scene=frame,
                start=sv.Point(x=x, y=0),
                end=sv.Point(x=x, y=height),
                color=self.grid_color,
                thickness=1,
            )

        for y in range(0, height + 1, self.grid_spacing):
            frame = sv.draw_line(
                scene=frame,
                start=sv.Point(x=0, y=y),
                end=sv.Point(x=width, y=y),
                color=self.grid_color,
                thickness=1,
            )

        return frame

    def draw_shape(
        self,
        frame: np.ndarray,
        polygon: Polygon,
        centroid: Point,
        selected: bool = False,
    ) -> np.ndarray:
        """
        Draw one shape: translucent fill, outline, centroid marker.

        Args:
            frame: Frame to draw on
            polygon: Shape vertices in canvas coordinates
            centroid: Marker position
            selected: Use the highlight style

        Returns:
            Frame with the shape drawn
        """
        if len(polygon) < 2:
            return frame

        color = self.selected_color if selected else self.shape_color
        opacity = self.selected_fill_opacity if selected else self.fill_opacity
        thickness = self.selected_thickness if selected else self.thickness
        vertices = to_pixels(polygon)

        # Fill only closes an area for 3+ vertices
        if len(polygon) >= 3:
            frame = sv.draw_filled_polygon(
                scene=frame,
                polygon=vertices,
                color=color,
                opacity=opacity,
            )

        frame = sv.draw_polygon(
            scene=frame,
            polygon=vertices,
            color=color,
            thickness=thickness,
        )

        return self.draw_centroid(frame, centroid)

    def draw_centroid(self, frame: np.ndarray, centroid: Point) -> np.ndarray:
        """Small filled disc at the centroid."""
        marker = circle(centroid, self.centroid_radius, 16)
        return sv.draw_filled_polygon(
            scene=frame,
            polygon=to_pixels(marker),
            color=self.centroid_color,
            opacity=1.0,
        )


def to_pixels(polygon: Polygon) -> np.ndarray:
    """Nx2 int32 vertex array, the dtype the drawing utilities expect."""
    return np.round(polygon.to_array()).astype(np.int32)
