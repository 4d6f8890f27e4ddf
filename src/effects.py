"""Named decorative effects built on the animation primitives.

Each builder takes setter callbacks (scale, opacity, offset...) and returns
an animation; the window decides what a "scale" or "opacity" means for a
given tk widget. Timings are the ones the app has always used.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List
from animation import (INDEFINITE, Parallel, Pause, Sequential, Setter, Transition,
                       ease_both, ease_in, linear)

HOVER_MS = 150
CLICK_MS = 100
PULSE_MS = 300
SHAKE_MS = 50
FADE_IN_MS = 500
GLOW_HALF_MS = 1500
EXIT_MS = 700
PARTICLE_INTERVAL_MS = 100
BUBBLES_PER_TICK = 2


def pulse(set_scale: Setter, delay_ms: float = 1000) -> Sequential:
    """Pause, then grow/shrink twice (4 auto-reversed cycles)."""
    return Sequential(
        Pause(delay_ms),
        Transition(PULSE_MS, set_scale, 1.0, 1.15, ease_both, cycle_count=4, auto_reverse=True),
    )


def hover(set_scale: Setter, scale_to: float, current: float = 1.0) -> Transition:
    """Mouse enters: grow from wherever the widget currently is to scale_to."""
    return Transition(HOVER_MS, set_scale, current, scale_to, ease_both)


def unhover(set_scale: Setter, scale_from: float, current: float) -> Transition:
    """Mouse leaves: settle back to the resting scale_from."""
    return Transition(HOVER_MS, set_scale, current, scale_from, ease_both)


def click(set_scale: Setter) -> Transition:
    return Transition(CLICK_MS, set_scale, 1.0, 0.9, ease_both, cycle_count=2, auto_reverse=True)


def shake(set_offset: Setter) -> Transition:
    return Transition(SHAKE_MS, set_offset, 0.0, 10.0, ease_both, cycle_count=6, auto_reverse=True)


def fade_in_and_slide(set_opacity: Setter, set_offset: Setter, delay_ms: float,
                      slide: float = 20.0) -> Sequential:
    """Callers should start the widget invisible and offset by ``slide``."""
    return Sequential(
        Pause(delay_ms),
        Parallel(
            Transition(FADE_IN_MS, set_opacity, 0.0, 1.0, ease_both),
            Transition(FADE_IN_MS, set_offset, slide, 0.0, ease_both),
        ),
    )


def title_glow(set_level: Setter, peak: float = 0.6) -> Transition:
    return Transition(GLOW_HALF_MS, set_level, 0.0, peak, linear,
                      cycle_count=INDEFINITE, auto_reverse=True)


def exit_animation(set_opacity: Setter, set_scale: Setter) -> Parallel:
    return Parallel(
        Transition(EXIT_MS, set_opacity, 1.0, 0.0, ease_both),
        Transition(EXIT_MS, set_scale, 1.0, 0.8, ease_both),
    )


# -------------------- particles --------------------
@dataclass
class Bubble:
    """Randomised parameters for one rising bubble."""
    radius: float
    x: float
    y: float
    rise: float
    rise_ms: float
    fade_ms: float
    fade_delay_ms: float
    scale_ms: float
    scale_to: float
    start_opacity: float = 0.7

    def animation(self, set_offset: Setter, set_opacity: Setter, set_scale: Setter) -> Parallel:
        """Rise (eased in), fade after a delay, and breathe in size once."""
        return Parallel(
            Transition(self.rise_ms, set_offset, 0.0, -self.rise, ease_in),
            Transition(self.fade_ms, set_opacity, self.start_opacity, 0.0, ease_both,
                       delay_ms=self.fade_delay_ms),
            Transition(self.scale_ms, set_scale, 1.0, self.scale_to, ease_both,
                       cycle_count=2, auto_reverse=True),
        )


def spawn_bubbles(rng: random.Random, width: float, height: float,
                  count: int = BUBBLES_PER_TICK) -> List[Bubble]:
    """Bubbles start just below the bottom edge and rise past the top.

    Nothing spawns while the area has not been laid out yet.
    """
    if width <= 0 or height <= 0:
        return []
    bubbles: List[Bubble] = []
    for _ in range(count):
        radius = rng.random() * 5 + 2
        bubbles.append(Bubble(
            radius=radius,
            x=rng.random() * width,
            y=height + radius,
            rise=height + radius * 2,
            rise_ms=(rng.random() * 3 + 2) * 1000,
            fade_ms=(rng.random() * 2 + 1) * 1000,
            fade_delay_ms=1000,
            scale_ms=(rng.random() * 1 + 0.5) * 1000,
            scale_to=rng.random() * 0.5 + 0.8,
        ))
    return bubbles
