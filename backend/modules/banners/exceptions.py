"""
Hero banner module exceptions.
"""

from shared.exceptions import NotFoundError


class BannerNotFoundError(NotFoundError):
    def __init__(self, banner_id: str):
        super().__init__(
            f"Banner not found: {banner_id}",
            code="BANNER_NOT_FOUND",
            details={"banner_id": banner_id},
        )
