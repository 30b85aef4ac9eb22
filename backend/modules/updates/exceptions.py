"""
Latest update module exceptions.
"""

from shared.exceptions import NotFoundError


class UpdateNotFoundError(NotFoundError):
    def __init__(self, update_id: str):
        super().__init__(
            f"Update not found: {update_id}",
            code="UPDATE_NOT_FOUND",
            details={"update_id": update_id},
        )
