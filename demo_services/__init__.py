"""
demo_services package initializer.
"""

from . import auth
from . import users

__all__ = ["auth", "users"]
