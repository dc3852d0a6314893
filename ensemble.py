# ensemble.py

import logging

import numpy as np
import pygame

from double_pendulum import DoublePendulum
from particle import ParticleShape

logger = logging.getLogger("pendulum_sim")


class PendulumEnsemble:
    """
    A fixed-size collection of independent double pendulums seeded with
    slightly perturbed arm lengths so their trajectories diverge.

    Data Contract:
    - Inputs:
        - config (dict): The 'simulation' section of config.json.
        - rng (np.random.Generator): The master seeded random number generator.
        - bounds (tuple): Current viewport (width, height) in pixels.
    - Outputs: None. This class modifies its internal state.
    - Invariants:
        - Exactly config['pendulum_count'] pendulums exist after every reset.
        - Pendulum i has r1 = base_r1 + i*d and r2 = base_r2 - i*d.
    """
    def __init__(self, config: dict, rng: np.random.Generator, bounds: tuple):
        self.config = config
        self.rng = rng
        self.bounds = bounds

        self.num_pendulums = config['pendulum_count']
        self.radius_perturbation = config['radius_perturbation']
        self.trail_enabled = config['trail_enabled']
        self.visible = config['visible']
        self.particle_shape = ParticleShape.DISC

        self.pendulums = []
        self._degenerate = set()
        self.reset()

    def reset(self):
        """
        Discards every pendulum and builds a fresh ensemble centred in the
        current viewport. Trails and emitters start empty.
        """
        cfg = self.config
        cx = self.bounds[0] / 2
        cy = self.bounds[1] / 2
        d = self.radius_perturbation

        self.pendulums = [
            DoublePendulum(
                r1=cfg['base_r1'] + i * d,
                r2=cfg['base_r2'] - i * d,
                m1=cfg['m1'],
                m2=cfg['m2'],
                a1=cfg['a1'],
                a2=cfg['a2'],
                g=cfg['gravity'],
                cx=cx,
                cy=cy,
                rng=self.rng,
                trail_enabled=self.trail_enabled,
                trail_length=cfg['trail_length'],
                visible=self.visible,
                particle_shape=self.particle_shape,
            )
            for i in range(self.num_pendulums)
        ]
        self._degenerate.clear()

        logger.info(f"Ensemble reset: {self.num_pendulums} pendulums centred at ({cx:.1f}, {cy:.1f}).")

    def advance_all(self, bounds: tuple):
        """
        Advances every pendulum by one tick, then advances and culls each
        pendulum's particles against the viewport `bounds`.
        """
        for idx, pendulum in enumerate(self.pendulums):
            pendulum.update()
            pendulum.emitter.advance(bounds)

            if idx not in self._degenerate and not pendulum.is_finite:
                self._degenerate.add(idx)
                logger.warning(
                    f"Pendulum {idx} reached a non-finite state "
                    f"(a1={pendulum.a1}, a2={pendulum.a2}). It will not be rendered."
                )

    def set_variant(self, variant):
        """Sets the particle shape on every emitter; kept across resets."""
        self.particle_shape = ParticleShape.from_value(variant)
        for pendulum in self.pendulums:
            pendulum.emitter.set_variant(self.particle_shape)
        logger.info(f"Particle shape set to {self.particle_shape.name}.")

    def set_visible(self, visible: bool):
        self.visible = visible
        for pendulum in self.pendulums:
            pendulum.visible = visible

    def set_trail_enabled(self, enabled: bool):
        """
        Turns trails on or off for every pendulum. Disabling empties each
        trail so re-enabling starts a fresh path from the current tip.
        """
        self.trail_enabled = enabled
        for pendulum in self.pendulums:
            pendulum.trail_enabled = enabled
            if not enabled:
                pendulum.trail.clear()

    def resize(self, bounds: tuple):
        """Stores a new viewport size; the next reset centres on it."""
        self.bounds = bounds
        logger.debug(f"Viewport resized to {bounds}.")

    def particle_count(self) -> int:
        return sum(len(p.emitter) for p in self.pendulums)

    def draw(self, screen: pygame.Surface):
        for pendulum in self.pendulums:
            pendulum.draw(screen)

    def __iter__(self):
        return iter(self.pendulums)

    def __len__(self):
        return len(self.pendulums)


class ResetTimer:
    """
    Tracks when the ensemble is due for its periodic reset.
    The host supplies the clock (milliseconds).

    The explicit Euler step is not energy conserving: with the shipped
    parameters every pendulum blows up to inf/NaN after roughly 2400-2800
    ticks. The default reset_interval_ms of 40000 (about 2400 ticks at
    60 FPS) reseeds the ensemble around that point.
    """
    def __init__(self, interval_ms: int):
        self.interval_ms = interval_ms
        self.last_reset = 0

    def start(self, now_ms: int):
        self.last_reset = now_ms

    restart = start

    def due(self, now_ms: int) -> bool:
        return now_ms - self.last_reset >= self.interval_ms
