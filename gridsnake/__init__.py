"""Grid snake with a fixed-timestep loop, pygame rendering and a persisted best score."""

__version__ = "0.1.0"
