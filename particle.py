# particle.py

import math
from enum import IntEnum

import numpy as np
import pygame

import constants
from vector2 import Vector2


class ParticleShape(IntEnum):
    """Rendered footprint of a particle. Purely cosmetic."""
    DISC = 0
    TRIANGLE = 1
    SQUARE = 2

    @classmethod
    def from_value(cls, value) -> "ParticleShape":
        """Maps 0/1/2 to a shape; any other value falls back to DISC."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.DISC


def hue_to_color(hue: float, alpha: float = 255.0) -> pygame.Color:
    """
    Converts a hue on the 0-255 scale (full saturation and brightness) and an
    alpha on the 0-255 scale into a pygame color.
    """
    color = pygame.Color(0, 0, 0)
    h = min(max(hue, 0.0), constants.HUE_MAX) / constants.HUE_MAX * 360.0
    a = min(max(alpha, 0.0), 255.0) / 255.0 * 100.0
    color.hsva = (h, 100.0, 100.0, a)
    return color


class Particle:
    """
    Represents a single decaying particle emitted from a pendulum tip.

    Physics is shared by every shape; only `draw` looks at the shape tag.

    Data Contract:
    - Inputs: position (x, y), color (hue, 0-255), rng (np.random.Generator).
    - Invariants:
        - lifespan strictly decreases by decay_rate on every advance().
        - acceleration is zero between ticks; forces are reapplied each tick.
    """
    def __init__(self, x: float, y: float, color: float, rng: np.random.Generator,
                 shape: ParticleShape = ParticleShape.DISC,
                 lifespan: float = None, decay_rate: float = None):
        self.position = Vector2(x, y)

        # Random initial velocity with dynamic speed scaling
        speed = rng.uniform(*constants.PARTICLE_SPEED_RANGE)
        self.velocity = Vector2(
            rng.uniform(*constants.PARTICLE_VX_RANGE),
            rng.uniform(*constants.PARTICLE_VY_RANGE),
        ).mult(speed)

        self.acceleration = Vector2(0.0, 0.0)

        if lifespan is None:
            lifespan = rng.uniform(*constants.PARTICLE_LIFESPAN_RANGE)
        if decay_rate is None:
            decay_rate = rng.uniform(*constants.PARTICLE_DECAY_RANGE)
        self.lifespan = float(lifespan)
        self.decay_rate = float(decay_rate)

        self.max_size = constants.PARTICLE_MAX_SIZE
        self.color = color
        self.shape = shape

    def apply_force(self, force):
        self.acceleration.add(Vector2(*force))

    def advance(self):
        """
        Updates the particle for one tick:
        v_new = v_old + a
        p_new = p_old + v_new
        """
        self.apply_force(constants.PARTICLE_GRAVITY)
        self.apply_force(constants.PARTICLE_WIND)

        self.velocity.add(self.acceleration)
        self.position.add(self.velocity)
        self.lifespan -= self.decay_rate
        self.acceleration.mult(0)

    def is_dead(self, bounds: tuple) -> bool:
        """
        A particle is dead once its lifespan is negative or it has left the
        viewport. `bounds` is the (width, height) supplied by the host.
        """
        width, height = bounds
        x, y = self.position
        if self.lifespan < 0.0:
            return True
        # Comparisons with NaN are all False, so test the inside instead.
        inside = 0 <= x <= width and 0 <= y <= height
        return not inside

    @property
    def size(self) -> float:
        """Render size: lifespan mapped from [0, 300] onto [0, max_size]."""
        return self.lifespan / constants.PARTICLE_SIZE_LIFESPAN * self.max_size

    @property
    def alpha(self) -> float:
        return min(max(self.lifespan, 0.0), 255.0)

    def draw(self, screen: pygame.Surface):
        """
        Draws the particle footprint selected by its shape tag.
        """
        size = self.size
        if size <= 0 or not self.position.is_finite() or not math.isfinite(self.color):
            return
        color = hue_to_color(self.color, self.alpha)
        x, y = self.position

        if self.shape == ParticleShape.TRIANGLE:
            h = math.sqrt(3) / 2 * size
            points = [
                (x, y - h / 2),
                (x - size / 2, y + h / 2),
                (x + size / 2, y + h / 2),
            ]
            pygame.draw.polygon(screen, color, points)
        elif self.shape == ParticleShape.SQUARE:
            pygame.draw.rect(screen, color, (x - size / 2, y - size / 2, size, size))
        else:
            pygame.draw.circle(screen, color, (x, y), size / 2)
