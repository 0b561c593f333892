# Core package initialization
# Cross-cutting concerns: configuration, logging, validation, errors.

from . import config, exceptions

__all__ = [
    "config",
    "exceptions",
]
