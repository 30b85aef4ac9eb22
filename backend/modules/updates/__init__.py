"""
Latest updates module.

News items for the homepage. Admins can pin items as top stories.
"""

from .interfaces import IUpdateService
from .models import LatestUpdate, SetContentRequest, SetTopRequest, UpdateFields
from .exceptions import UpdateNotFoundError

__all__ = [
    "IUpdateService",
    "LatestUpdate",
    "SetContentRequest",
    "SetTopRequest",
    "UpdateFields",
    "UpdateNotFoundError",
]
