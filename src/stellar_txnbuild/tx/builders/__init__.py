"""
Operation builders.

Provides fluent builders over the operation request models.
"""

from .base import BaseOperationBuilder
from .set_options import SetOptionsBuilder

__all__ = [
    "BaseOperationBuilder",
    "SetOptionsBuilder",
]
