"""
Base repository for Supabase-backed tables.
"""

import uuid
from datetime import datetime, timezone
from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Holds the Supabase client and the helpers every table needs.

    Subclasses map rows to their own Pydantic models; T names that model
    for type hints only.
    """

    def __init__(self, db: Client) -> None:
        self._db = db

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def _is_uuid(value: str) -> bool:
        """
        Check whether a value can be used as a uuid primary key.

        PostgREST rejects malformed uuids with a 400, so callers treat
        them as "not found" instead of sending the query.
        """
        try:
            uuid.UUID(str(value))
        except (ValueError, TypeError):
            return False
        return True
