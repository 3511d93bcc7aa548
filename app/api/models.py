from typing import Any, Optional

from pydantic import BaseModel

from app.features.journaling.models import JournalEntry, StreakSnapshot
from app.shared.models import CamelModel


class CurrentUser(BaseModel):
    """The authenticated Supabase user a request acts for."""
    id: str
    email: Optional[str] = None
    display_name: str = "User"

    @classmethod
    def from_supabase(cls, user: Any) -> "CurrentUser":
        email = getattr(user, "email", None)
        metadata = getattr(user, "user_metadata", None) or {}
        display_name = metadata.get("name") or (email.split("@")[0] if email else "User")
        return cls(id=str(user.id), email=email, display_name=display_name)


class EntryCreatedResponse(CamelModel):
    entry: JournalEntry
    streak: StreakSnapshot


class DeletedResponse(CamelModel):
    status: str = "success"
    deleted: str
