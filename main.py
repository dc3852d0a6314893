# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from ensemble import PendulumEnsemble, ResetTimer
from particle import ParticleShape

# Get the application's dedicated logger
logger = logging.getLogger("pendulum_sim")

# Keys '1', '2', '3' select the particle shape for every emitter.
SHAPE_KEYS = {
    pygame.K_1: ParticleShape.DISC,
    pygame.K_2: ParticleShape.TRIANGLE,
    pygame.K_3: ParticleShape.SQUARE,
}


def run_simulation_loop(ensemble, screen, clock, sim_config):
    """
    The main frame loop: input, periodic reset, one simulation tick, drawing.
    """
    running = True
    tick = 0
    bounds = screen.get_size()

    timer = ResetTimer(sim_config['reset_interval_ms'])
    timer.start(pygame.time.get_ticks())

    while running:
        # Event handling
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                bounds = (event.w, event.h)
                ensemble.resize(bounds)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in SHAPE_KEYS:
                    ensemble.set_variant(SHAPE_KEYS[event.key])
                elif event.key == pygame.K_r:
                    ensemble.reset()
                    timer.restart(pygame.time.get_ticks())
                elif event.key == pygame.K_v:
                    ensemble.set_visible(not ensemble.visible)
                elif event.key == pygame.K_t:
                    ensemble.set_trail_enabled(not ensemble.trail_enabled)

        now = pygame.time.get_ticks()
        if timer.due(now):
            ensemble.reset()
            timer.restart(now)

        # --- Physics & Logic Update ---
        ensemble.advance_all(bounds)

        # --- Logging (throttled) ---
        if tick % sim_config['log_interval_ticks'] == 0:
            logger.debug(
                f"Tick={tick}, "
                f"Pendulums={len(ensemble)}, "
                f"LiveParticles={ensemble.particle_count()}, "
                f"FPS={clock.get_fps():.1f}"
            )

        # --- Drawing ---
        # Particles carry their own alpha, so draw onto a transparent layer.
        screen.fill(constants.BLACK)
        layer = pygame.Surface(bounds, pygame.SRCALPHA)
        ensemble.draw(layer)
        screen.blit(layer, (0, 0))

        pygame.display.flip()
        clock.tick(constants.FPS)
        tick += 1

    logger.info(f"Loop exited after {tick} ticks.")


def main():
    """
    Main function to initialize and run the pendulum ensemble.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)
    sim_config = config['simulation']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    ensemble = PendulumEnsemble(
        config=sim_config,
        rng=rng,
        bounds=screen.get_size()
    )

    run_simulation_loop(ensemble, screen, clock, sim_config)

    logger.info("Application shutting down.")
    pygame.quit()

if __name__ == "__main__":
    main()
