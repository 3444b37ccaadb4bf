"""emplace - mirror the packages you install across machines."""

__version__ = "0.4.0"
