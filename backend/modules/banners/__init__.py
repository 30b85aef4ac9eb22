"""
Hero banners module.

Homepage banners with separate desktop and mobile artwork.
"""

from .interfaces import IBannerService
from .models import HeroBanner
from .exceptions import BannerNotFoundError

__all__ = [
    "IBannerService",
    "HeroBanner",
    "BannerNotFoundError",
]
