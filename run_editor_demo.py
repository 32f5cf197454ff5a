import math

import supervision as sv

from cadgeo_cli.utils import get_target_run_folder
from cadgeo_editor import EditorConfig, EditorService, SteppedClock
from cadgeo_engine import Point

CONFIG_PATH = "./config/editor.yaml"
FPS = 30


class DemoScript:
    """
    Scripted pointer gestures on one square.

    Design: every gesture yields pointer positions, one per video frame,
    so the session plays back at the video's frame rate.
    """

    def __init__(self, frames_per_gesture: int = 45):
        self.frames_per_gesture = frames_per_gesture

    def drag(self, start: Point, end: Point):
        for i in range(self.frames_per_gesture + 1):
            t = i / self.frames_per_gesture
            yield Point(start.x + (end.x - start.x) * t, start.y + (end.y - start.y) * t)

    def orbit(self, center: Point, radius: float, turns: float = 1.0):
        for i in range(self.frames_per_gesture + 1):
            angle = 2 * math.pi * turns * i / self.frames_per_gesture
            yield Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def play(service: EditorService, sink: sv.VideoSink, tool: str, grab: Point, path) -> None:
    """Run one gesture and write a frame per pointer position."""
    service.set_tool(tool)
    service.pointer_down(grab)
    for pos in path:
        service.pointer_move(pos)
        sink.write_frame(service.render())
    service.pointer_up()


def main():
    TARGET_RUN_FOLDER = get_target_run_folder(application_name="editor_demo")
    TARGET_VIDEO_PATH = f"{TARGET_RUN_FOLDER}/output.mp4"

    config = EditorConfig.from_yaml(CONFIG_PATH)
    service = EditorService(config, seed=7, clock=SteppedClock(1000 / FPS))

    square = service.add_shape("square", Point(150, 150))
    service.add_shape("triangle", Point(450, 120))
    service.add_shape("circle", Point(420, 300))

    video_info = sv.VideoInfo(width=config.canvas.width, height=config.canvas.height, fps=FPS)
    script = DemoScript()

    with sv.VideoSink(target_path=TARGET_VIDEO_PATH, video_info=video_info) as out_video_sink:
        # Drag across the canvas, past the right edge (clamped)
        play(service, out_video_sink, "select", Point(150, 150),
             script.drag(Point(150, 150), Point(650, 250)))

        center = service.store.get(square.id).transform.translate
        play(service, out_video_sink, "rotate", Point(center.x + 20, center.y),
             script.orbit(center, 20))
        play(service, out_video_sink, "scale", Point(center.x + 20, center.y),
             script.drag(Point(center.x + 20, center.y), Point(center.x + 60, center.y)))

    print(f"Editor demo completed. Output: {TARGET_VIDEO_PATH}")
    print(f"Selected: {service.selected_properties()}")


if __name__ == "__main__":
    main()
