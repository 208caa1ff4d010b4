"""comphost: keep a set of compose projects cloned, started and stopped together."""

__version__ = "0.1.0"
