"""Disposable MySQL containers for local development."""

__version__ = "1.0.0"
