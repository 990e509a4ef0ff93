"""Severity registry: rule severity catalog and violation fix dispatch."""

__version__ = "0.1.0"
