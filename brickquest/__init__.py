"""A side-scrolling platform game whose levels are drawn as images."""

__version__ = "0.1.0"