"""
Sponsors module.

Sponsor cards shown on the site, managed by admins.
"""

from .interfaces import ISponsorService
from .models import Sponsor, SponsorRequest, UpdateSponsorRequest
from .exceptions import SponsorNotFoundError

__all__ = [
    "ISponsorService",
    "Sponsor",
    "SponsorRequest",
    "UpdateSponsorRequest",
    "SponsorNotFoundError",
]
