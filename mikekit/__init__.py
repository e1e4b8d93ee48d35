"""Gameplay building blocks: vector math, events, simulated timers and health, sprint, reordering and perception components."""

__version__ = "0.1.0"