"""hullkit — Graham scan convex hulls of 2-D point sets."""

__version__ = "0.1.0"
