import importlib
import os
import subprocess
import sys
from pathlib import Path

import pygame
import pytest

from particleheart.simulator import Simulator

run_module = importlib.import_module("particleheart.run")

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture()
def closes(monkeypatch):
    """Record every Simulator.close() made by the run loop."""
    calls = []

    class TrackingSimulator(Simulator):
        def close(self) -> None:
            calls.append(self)
            super().close()

    monkeypatch.setattr(run_module, "Simulator", TrackingSimulator)
    return calls


def _stop_at(stop_frame, event, seen):
    def render(canvas, t, frame):
        seen.append(frame)
        canvas.clear((frame, 0, 0))
        if frame == stop_frame:
            pygame.event.post(event)
    return render


def test_frames_count_up_until_quit(closes):
    seen = []
    run_module.run(_stop_at(4, pygame.event.Event(pygame.QUIT), seen),
                   fps=1000, width=32, height=24)
    assert seen == [0, 1, 2, 3, 4]
    assert len(closes) == 1


def test_escape_ends_loop(closes):
    seen = []
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    run_module.run(_stop_at(2, escape, seen), fps=1000, width=32, height=24, scale=2)
    assert seen == [0, 1, 2]
    assert len(closes) == 1


def test_keyboard_interrupt_still_closes(closes):
    seen = []

    def render(canvas, t, frame):
        seen.append(frame)
        if frame == 1:
            raise KeyboardInterrupt

    run_module.run(render, fps=1000, width=32, height=24)
    assert seen == [0, 1]
    assert len(closes) == 1


def test_render_errors_propagate_and_close(closes):
    def render(canvas, t, frame):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        run_module.run(render, fps=1000, width=32, height=24)
    assert len(closes) == 1


def test_recorder_import_is_quiet():
    env = dict(os.environ)
    env.pop("PYGAME_HIDE_SUPPORT_PROMPT", None)
    env.pop("SDL_VIDEODRIVER", None)
    result = subprocess.run(
        [sys.executable, "-c", "import particleheart.record, os; print(os.environ['SDL_VIDEODRIVER'])"],
        cwd=ROOT, env=env, capture_output=True, text=True, check=True,
    )
    assert "pygame community" not in result.stdout
    assert result.stdout.strip() == "dummy"
