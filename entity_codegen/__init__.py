"""Generate FreeBuilder-style Java interfaces and Scala traits from entity definitions."""

__version__ = "0.1.0"
