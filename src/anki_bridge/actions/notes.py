"""Note actions: lookup, creation, field updates and deletion."""

from pydantic import Field

from anki_bridge.action import AnkiAction, WireModel


class NoteMedia(WireModel):
    """Media file to download or store and embed into note fields.

    Exactly one of ``url``, ``path`` or ``data`` (base64) is expected.
    """

    url: str | None = None
    path: str | None = None
    data: str | None = None
    filename: str
    skip_hash: str | None = None
    fields: list[str] = Field(default_factory=list)


class NoteField(WireModel):
    """Field value of a note and its position in the note type."""

    value: str
    order: int


class NoteInfo(WireModel):
    """One entry of the ``notesInfo`` result."""

    note_id: int
    model_name: str
    tags: list[str]
    fields: dict[str, NoteField]
    cards: list[int] = Field(default_factory=list)


class NotesInfo(AnkiAction[list[NoteInfo]]):
    """Fields, tags and note type of each given note."""

    ACTION = "notesInfo"

    notes: list[int]


class NoteUpdate(WireModel):
    """Note ID and the field values to overwrite."""

    id: int
    fields: dict[str, str]
    audio: list[NoteMedia] | None = None
    video: list[NoteMedia] | None = None
    picture: list[NoteMedia] | None = None


class UpdateNoteFields(AnkiAction[None]):
    """Update fields of an existing note. The note must not be open in the browser."""

    ACTION = "updateNoteFields"

    note: NoteUpdate


class FindNotes(AnkiAction[list[int]]):
    """Note IDs matching a search query."""

    ACTION = "findNotes"

    query: str


class NewNote(WireModel):
    """Note to add: target deck, note type, fields, tags and optional media."""

    deck_name: str
    model_name: str
    fields: dict[str, str]
    tags: list[str] = Field(default_factory=list)
    audio: list[NoteMedia] | None = None
    video: list[NoteMedia] | None = None
    picture: list[NoteMedia] | None = None


class AddNote(AnkiAction[int]):
    """Create a note and return its ID."""

    ACTION = "addNote"

    note: NewNote


class DeleteNotes(AnkiAction[None]):
    """Delete notes and all their cards."""

    ACTION = "deleteNotes"

    notes: list[int]
