"""Colour maths, single-producer single-consumer queues, a 2D grid and an interface palette."""

__version__ = "0.1.0"
__all__ = ["blockingqueue", "okcolor", "rwqueue", "semaphore", "style", "vector2d"]