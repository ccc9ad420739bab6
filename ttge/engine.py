"""Window set-up and the main loop."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Sequence

__all__ = ["Engine", "main"]

WIDTH = 800
HEIGHT = 600
TITLE = "103GE"
CLEAR_COLOR = (0.1, 0.1, 0.1, 1.0)


def _pyglet_window() -> Any:
    import pyglet
    from pyglet import gl

    config = gl.Config(major_version=3, minor_version=3, forward_compatible=True)
    window = pyglet.window.Window(WIDTH, HEIGHT, TITLE, config=config)
    gl.glClearColor(*CLEAR_COLOR)
    return window


class Engine:
    """Owns the window and runs the frame loop until it is asked to close."""

    def __init__(
        self,
        window_factory: Optional[Callable[[], Any]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._window_factory = window_factory or _pyglet_window
        self._clock = clock
        self.window: Any = None
        self.should_close = False
        self.last_check = 0.0
        self.last_delta = 0.0
        self.frame_count = 0

    def init(self) -> None:
        self.window = self._window_factory()
        self.should_close = False

    def update(self, delta: float) -> None:
        """Per-frame hook; records the frame's delta and counts the frame."""
        self.last_delta = delta
        self.frame_count += 1

    def tick(self, now: float) -> float:
        """Advance one frame's timing and call :meth:`update`; returns the delta."""
        delta = self.last_check - now
        self.last_check = now
        self.update(delta)
        return delta

    def run(self) -> None:
        if self.window is None:
            raise RuntimeError("engine is not initialised")
        self.last_check = self._clock()
        while not self.should_close:
            self.window.clear()
            self.tick(self._clock())
            self.window.dispatch_events()
            self.window.flip()
            self.should_close = bool(self.window.has_exit)

    def destroy(self) -> None:
        if self.window is not None:
            self.window.close()
            self.window = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    engine = Engine()
    engine.init()
    try:
        engine.run()
    finally:
        engine.destroy()
    return 0