from typing import Optional

from pydantic import BaseModel


class NoteOut(BaseModel):
    id: str
    title: str
    content: str
    created_at: str
    updated_at: str


class DraftChange(BaseModel):
    # drafts are unvalidated until save, so no length limits here
    title: Optional[str] = None
    content: Optional[str] = None


class FieldErrors(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
