"""Mass-spring cloth simulation: vectors, masses, springs, cloths, constraints, integrators and text demos."""

__version__ = "0.1.0"
__all__ = [
    "vector",
    "integrator",
    "mass",
    "spring",
    "drawing",
    "cloth",
    "constraint",
    "system",
    "shapes",
    "composed",
    "cli",
]