# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between simulation runs.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

import math

# Screen dimensions (initial window size, the window is resizable)
WIDTH = 1600  # Pixels
HEIGHT = 1000  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Double Pendulum Particles"

# Hue scale used throughout the simulation (HSB with a 255 range).
HUE_MAX = 255.0
TWO_PI = 2 * math.pi

# Particle forces, applied every tick (pixels / tick^2)
PARTICLE_GRAVITY = (0.0, 0.05)
PARTICLE_WIND = (-0.02, 0.0)  # Small wind blowing from the right

# Particle spawn distributions (uniform ranges)
PARTICLE_SPEED_RANGE = (0.5, 2.0)
PARTICLE_VX_RANGE = (-1.0, 1.0)
PARTICLE_VY_RANGE = (-1.0, 0.0)
PARTICLE_LIFESPAN_RANGE = (150.0, 300.0)
PARTICLE_DECAY_RANGE = (1.0, 3.0)

# Particle rendering
PARTICLE_MAX_SIZE = 8  # Pixels, size at full lifespan
PARTICLE_SIZE_LIFESPAN = 300.0  # Lifespan that maps to PARTICLE_MAX_SIZE

# Pendulum rendering
PENDULUM_STROKE_WEIGHT = 2  # Pixels
