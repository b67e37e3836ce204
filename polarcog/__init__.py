"""Center of gravity of weighted items in polar coordinates, a text plot, and UCB scoring."""

__version__ = "0.1.0"