from dataclasses import replace

import numpy as np
import pygame
import pytest
from PIL import Image

from particleheart import app, record
from particleheart.canvas import Canvas
from particleheart.heart import Heart
from particleheart.simulator import Simulator


@pytest.fixture()
def installed_heart(small_config, rng, monkeypatch):
    heart = Heart(4, config=small_config, rng=rng)
    monkeypatch.setattr(app, "_heart", heart)
    return heart


def test_render_clears_and_draws(installed_heart):
    canvas = Canvas()
    canvas.clear((50, 50, 50))
    app.render(canvas, 0.0, 0)
    assert canvas.get(0, 0) == (0, 0, 0)
    assert np.all(canvas.pixels == installed_heart.config.color, axis=2).any()


def test_render_is_cyclic(small_config, rng, monkeypatch):
    heart = Heart(4, config=replace(small_config, caption=""), rng=rng)
    monkeypatch.setattr(app, "_heart", heart)
    a, b = Canvas(), Canvas()
    app.render(a, 0.0, 1)
    app.render(b, 0.0, 1 + heart.cycle_length * 50)
    assert np.array_equal(a.pixels, b.pixels)


def test_seed_from_env(monkeypatch):
    monkeypatch.delenv("HEART_SEED", raising=False)
    assert app.seed_from_env() is None
    monkeypatch.setenv("HEART_SEED", "42")
    assert app.seed_from_env() == 42
    monkeypatch.setenv("HEART_SEED", "abc")
    with pytest.raises(ValueError):
        app.seed_from_env()


def test_render_gif(tmp_path, installed_heart):
    out = record.render_gif(tmp_path / "out" / "heart.gif", app.render, frames=3, scale=0.25)
    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (210, 170)
        assert img.n_frames == 3


def test_render_gif_rejects_zero_frames(tmp_path):
    with pytest.raises(ValueError):
        record.render_gif(tmp_path / "x.gif", app.render, frames=0)


def test_canvas_to_image_scales():
    canvas = Canvas(10, 8)
    canvas.set(0, 0, (255, 0, 0))
    img = record.canvas_to_image(canvas, scale=2)
    assert img.size == (20, 16)
    assert img.getpixel((1, 1)) == (255, 0, 0)


def test_simulator_headless():
    canvas = Canvas(40, 30)
    canvas.rect(0, 0, 10, 10, (255, 215, 0))
    sim = Simulator(canvas, scale=2, title="test")
    try:
        assert sim.update()
        assert sim.screen.get_at((1, 1))[:3] == (255, 215, 0)
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert not sim.update()
    finally:
        sim.close()
