from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from noteapp.models.notes import FieldErrors, NoteOut


class NoteRow(BaseModel):
    id: str
    title: str
    preview: str
    updated_at: str


class ListView(BaseModel):
    kind: Literal["list"] = "list"
    notes: list[NoteRow]
    empty_message: Optional[str] = None


class DetailView(BaseModel):
    kind: Literal["detail"] = "detail"
    note: NoteOut


class EditView(BaseModel):
    kind: Literal["edit"] = "edit"
    mode: Literal["new", "existing"]
    note_id: Optional[str] = None
    header: str
    title: str
    content: str
    errors: FieldErrors
    content_counter: Optional[str] = None


class ScreenOut(BaseModel):
    depth: int
    stack: list[str]
    screen: Annotated[Union[ListView, DetailView, EditView], Field(discriminator="kind")]
