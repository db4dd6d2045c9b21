"""Route finding on grid maps where bombs can clear boulders."""

__version__ = "0.1.0"
__all__ = ["__version__"]