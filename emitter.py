# emitter.py

import numpy as np
import pygame

from particle import Particle, ParticleShape
from vector2 import Vector2


class Emitter:
    """
    Owns the live particles spawned at a moving origin.

    Particles are never shared between emitters. The shape selector only
    affects particles spawned after it changes.
    """
    def __init__(self, x: float, y: float, rng: np.random.Generator,
                 shape: ParticleShape = ParticleShape.DISC):
        self.origin = Vector2(x, y)
        self.rng = rng
        self.shape = ParticleShape.from_value(shape)
        self.particles = []

    def set_variant(self, variant):
        """Selects the shape for subsequently spawned particles (0, 1 or 2; anything else is DISC)."""
        self.shape = ParticleShape.from_value(variant)

    def spawn_particle(self, color: float, origin: Vector2 = None) -> Particle:
        """
        Spawns one particle of the current shape and returns it.

        `origin` comes second because it is optional: the owning pendulum
        moves `self.origin` every tick and only passes the color.
        """
        if origin is None:
            origin = self.origin
        particle = Particle(origin.x, origin.y, color, self.rng, shape=self.shape)
        self.particles.append(particle)
        return particle

    def advance(self, bounds: tuple):
        """
        Advances every live particle and removes the dead ones.
        Scans back to front so removals never skip a particle.
        """
        for i in range(len(self.particles) - 1, -1, -1):
            p = self.particles[i]
            p.advance()
            if p.is_dead(bounds):
                del self.particles[i]

    def draw(self, screen: pygame.Surface):
        for p in self.particles:
            p.draw(screen)

    def __len__(self):
        return len(self.particles)
