"""Classic numerical methods: root finding, naive Gaussian elimination and direct interpolation."""

__version__ = "0.1.0"
__all__ = ["rootfinding", "linear", "interpolation"]