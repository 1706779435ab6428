"""Front end of a small transpiler: tag scanning, includes and project state."""

__version__ = "0.1.0"
__all__ = ["cli", "model", "project", "reader", "tools", "writer"]