"""Integer lattice math: vectors, lattice ordering, bounding boxes, Morton codes and grid ray traversal."""

__version__ = "0.4.0"

__all__ = ["vector", "lattice", "morton", "aabb", "grid_ray"]