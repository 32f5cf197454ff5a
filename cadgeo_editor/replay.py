"""
Scenario Replay
===============

Runs a YAML list of editor commands through an EditorService's command
registry.

Scenario format:

    steps:
      - add_shape: {kind: square, x: 200, y: 150, id: sq}
      - set_tool: {tool: scale}
      - pointer_down: {x: 250, y: 150}
      - pointer_move: {x: 350, y: 150}
      - pointer_up
      - render

A step is either a bare command name or a one-key mapping of command name
to its arguments.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import numpy as np
import yaml

from cadgeo_editor.service import EditorService


Step = Tuple[str, Optional[Dict[str, Any]]]
FrameCallback = Callable[[int, np.ndarray], None]


class SteppedClock:
    """
    Deterministic clock advancing by a fixed step on every read.

    Replays use it so pointer moves are spaced by step_ms regardless of how
    fast the script runs.
    """

    def __init__(self, step_ms: float = 20.0, start: float = 0.0):
        self.step_ms = step_ms
        self._now = start

    def __call__(self) -> float:
        self._now += self.step_ms / 1000.0
        return self._now


def parse_steps(raw: Any) -> List[Step]:
    """
    Normalize scenario steps.

    Raises:
        ValueError: Malformed step
    """
    if isinstance(raw, dict):
        raw = raw.get("steps")
    if not isinstance(raw, list):
        raise ValueError("Scenario must be a list of steps or a mapping with a 'steps' list")

    steps: List[Step] = []
    for index, item in enumerate(raw):
        if isinstance(item, str):
            steps.append((item, None))
        elif isinstance(item, dict) and len(item) == 1:
            command, args = next(iter(item.items()))
            if args is not None and not isinstance(args, dict):
                raise ValueError(f"Step {index}: arguments of '{command}' must be a mapping")
            steps.append((command, args))
        else:
            raise ValueError(f"Step {index}: expected a command name or a one-key mapping, got {item!r}")
    return steps


def load_scenario(path: Union[str, Path]) -> List[Step]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")

    with open(path) as f:
        return parse_steps(yaml.safe_load(f))


def run_scenario(
    service: EditorService,
    steps: List[Step],
    on_frame: Optional[FrameCallback] = None,
) -> int:
    """
    Execute steps in order.

    Args:
        service: Editor to drive
        steps: Parsed steps
        on_frame: Called with (frame_index, frame) for every render step

    Returns:
        Number of frames rendered

    Raises:
        CommandNotAvailableError: Unknown command in the scenario
    """
    frames = 0
    for command, args in steps:
        result = service.command_registry.execute(command, args)
        if command == "render" and on_frame is not None:
            on_frame(frames, result)
        if command == "render":
            frames += 1
    return frames
