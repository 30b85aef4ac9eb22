"""
Sponsor module exceptions.
"""

from shared.exceptions import NotFoundError


class SponsorNotFoundError(NotFoundError):
    def __init__(self, sponsor_id: str):
        super().__init__(
            f"Sponsor not found: {sponsor_id}",
            code="SPONSOR_NOT_FOUND",
            details={"sponsor_id": sponsor_id},
        )
