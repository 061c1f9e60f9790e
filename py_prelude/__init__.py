"""Seeded randomness, vector helpers and shape wrappers for CAD scripts."""

from .config import settings
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .utils.log_config import configure_logging

configure_logging(settings)

__all__ = ['settings', 'configure_logging', *_core_all]
