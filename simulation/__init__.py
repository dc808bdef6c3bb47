# simulation/__init__.py
"""Simulation modules for Cascade.

- grid: two-generation level/velocity lattice with the gravity + advection step
- splat: trilinear corner weights used to scatter mass onto the lattice
"""

from simulation.grid import FluidGrid
from simulation.splat import trilinear_corners, corner_weights

__all__ = ["FluidGrid", "trilinear_corners", "corner_weights"]
