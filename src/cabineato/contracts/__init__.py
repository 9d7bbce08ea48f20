"""Protocols decoupling the application layer from its collaborators."""

from .protocols import Clock, SystemClock, Validator

__all__ = ["Clock", "SystemClock", "Validator"]
