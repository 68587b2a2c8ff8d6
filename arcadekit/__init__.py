"""Small frame-stepped arcade games with a headless input and drawing model."""

__version__ = "1.0.0"