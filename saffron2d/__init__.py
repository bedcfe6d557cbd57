"""Building blocks for 2D applications: vectors, events, clocks, scheduling, batches, transforms, animation and a camera."""

__version__ = "0.1.0"