"""Docking building blocks: geometry, atom typing, scoring terms, energy grids, pose bookkeeping, statistics and thread helpers."""

__version__ = "0.1.0"