"""Developer documentation generator for plugin and theme authors."""

__version__ = "0.1.0"
