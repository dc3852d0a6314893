# double_pendulum.py

import math

import numba
import numpy as np
import pygame

import constants
from emitter import Emitter
from particle import hue_to_color
from trail import TrailBuffer, TrailPoint

# --- JIT-Compiled Physics Function ---
# Compiled with the numpy error model so that a vanishing denominator yields
# inf/NaN instead of raising ZeroDivisionError. fastmath is off because it
# assumes no NaN/inf.

@numba.jit(nopython=True, error_model='numpy')
def _angular_accelerations_jit(a1, a2, a1_v, a2_v, r1, r2, m1, m2, g):
    """
    Angular accelerations of both links of a double pendulum
    (point masses on massless rods).
    """
    num1 = -g * (2 * m1 + m2) * np.sin(a1)
    num2 = -m2 * g * np.sin(a1 - 2 * a2)
    num3 = -2 * np.sin(a1 - a2) * m2
    num4 = a2_v * a2_v * r2 + a1_v * a1_v * r1 * np.cos(a1 - a2)
    den = r1 * (2 * m1 + m2 - m2 * np.cos(2 * a1 - 2 * a2))
    a1_a = (num1 + num2 + num3 * num4) / den

    num1 = 2 * np.sin(a1 - a2)
    num2 = a1_v * a1_v * r1 * (m1 + m2)
    num3 = g * (m1 + m2) * np.cos(a1)
    num4 = a2_v * a2_v * r2 * m2 * np.cos(a1 - a2)
    den = r2 * (2 * m1 + m2 - m2 * np.cos(2 * a1 - 2 * a2))
    a2_a = (num1 * (num2 + num3 + num4)) / den

    return a1_a, a2_a


def _wrap_angle(angle: float) -> float:
    """Wraps an angle into [0, 2*pi). NaN stays NaN."""
    wrapped = angle % constants.TWO_PI
    # Float modulo of a tiny negative value can round up to exactly 2*pi.
    if wrapped >= constants.TWO_PI:
        wrapped = 0.0
    return wrapped


class DoublePendulum:
    """
    One chaotic two-link pendulum swinging about the pivot (cx, cy).

    Each `update()` integrates one tick with semi-implicit Euler (velocities
    first, then angles from the updated velocities), records the tip in the
    trail and spawns one particle at the tip. The emitter's own particles are
    advanced separately by the owner, against the current viewport.

    Data Contract:
    - Inputs: arm lengths r1, r2; masses m1, m2; initial angles a1, a2 (radians);
      gravity g; pivot cx, cy; rng for the emitter's particles.
    - Invariants:
        - a1 and a2 are in [0, 2*pi) after every update (or NaN once degenerate).
        - r1, r2, m1, m2 and g never change after construction.
        - current_hue is angle_diff mapped from [0, 2*pi) onto [0, 255).
    """
    def __init__(self, r1: float, r2: float, m1: float, m2: float, a1: float, a2: float,
                 g: float, cx: float, cy: float, rng: np.random.Generator,
                 trail_enabled: bool = True, trail_length: int = 200, visible: bool = True,
                 particle_shape=0):
        self._r1 = float(r1)
        self._r2 = float(r2)
        self._m1 = float(m1)
        self._m2 = float(m2)
        self._g = float(g)
        self.a1 = float(a1)
        self.a2 = float(a2)
        self.a1_v = 0.0
        self.a2_v = 0.0
        self.cx = cx
        self.cy = cy

        self.trail_enabled = trail_enabled
        self.trail = TrailBuffer(trail_length)
        self.visible = visible

        # The emitter follows the second bob; it is repositioned on the first update.
        self.emitter = Emitter(0, 0, rng, shape=particle_shape)

        self.angle_diff = 0.0
        self.current_hue = 0.0

    @property
    def r1(self):
        return self._r1

    @property
    def r2(self):
        return self._r2

    @property
    def m1(self):
        return self._m1

    @property
    def m2(self):
        return self._m2

    @property
    def g(self):
        return self._g

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.a1, self.a2, self.a1_v, self.a2_v))

    def _bob_positions(self):
        """Both bob positions relative to the pivot."""
        x1 = self._r1 * math.sin(self.a1)
        y1 = self._r1 * math.cos(self.a1)
        x2 = x1 + self._r2 * math.sin(self.a2)
        y2 = y1 + self._r2 * math.cos(self.a2)
        return x1, y1, x2, y2

    def update(self):
        a1_a, a2_a = _angular_accelerations_jit(
            self.a1, self.a2, self.a1_v, self.a2_v,
            self._r1, self._r2, self._m1, self._m2, self._g
        )

        self.a1_v += a1_a
        self.a2_v += a2_a
        self.a1 += self.a1_v
        self.a2 += self.a2_v

        self.a1 = _wrap_angle(self.a1)
        self.a2 = _wrap_angle(self.a2)

        self.angle_diff = _wrap_angle(self.a1 - self.a2)
        self.current_hue = self.angle_diff / constants.TWO_PI * constants.HUE_MAX

        _, _, x2, y2 = self._bob_positions()

        if self.trail_enabled:
            self.trail.append(TrailPoint(x2, y2, self.current_hue))

        self.emitter.origin.set(x2 + self.cx, y2 + self.cy)
        self.emitter.spawn_particle(self.current_hue)

    def tip_position(self):
        """World position of the second bob."""
        _, _, x2, y2 = self._bob_positions()
        return x2 + self.cx, y2 + self.cy

    def arm_endpoints(self):
        """
        World positions of the pivot, the first bob and the second bob.
        The two arms are pivot->first and first->second.
        """
        x1, y1, x2, y2 = self._bob_positions()
        return (
            (self.cx, self.cy),
            (x1 + self.cx, y1 + self.cy),
            (x2 + self.cx, y2 + self.cy),
        )

    def draw(self, screen: pygame.Surface):
        """
        Draws the arms and bobs (if visible), the trail (if enabled) and then
        the emitter's particles. Non-finite geometry is skipped.
        """
        if self.visible and self.is_finite and math.isfinite(self.current_hue):
            color = hue_to_color(self.current_hue)
            pivot, bob1, bob2 = self.arm_endpoints()
            pygame.draw.line(screen, color, pivot, bob1, constants.PENDULUM_STROKE_WEIGHT)
            pygame.draw.circle(screen, color, bob1, self._m1 / 2)
            pygame.draw.line(screen, color, bob1, bob2, constants.PENDULUM_STROKE_WEIGHT)
            pygame.draw.circle(screen, color, bob2, self._m2 / 2)

        if self.trail_enabled and len(self.trail) > 1:
            for prev, current in self.trail.segments():
                if not all(math.isfinite(v) for v in (*prev, *current)):
                    continue
                pygame.draw.line(
                    screen,
                    hue_to_color(current.hue),
                    (prev.x + self.cx, prev.y + self.cy),
                    (current.x + self.cx, current.y + self.cy),
                    constants.PENDULUM_STROKE_WEIGHT
                )

        self.emitter.draw(screen)
