"""GUI actions: drive Anki's windows (browser, add/edit dialogs, reviewer)."""

from anki_bridge.action import AnkiAction, WireModel
from anki_bridge.actions.notes import NewNote


class GuiBrowse(AnkiAction[list[int]]):
    """Open the Card Browser on a search query and return the found card IDs."""

    ACTION = "guiBrowse"

    query: str


class GuiSelectedNotes(AnkiAction[list[int]]):
    """Note IDs selected in the open Card Browser; empty if it is closed."""

    ACTION = "guiSelectedNotes"


class GuiAddCards(AnkiAction[int]):
    """Open Add Cards preset with a note; returns the ID the note would get if confirmed.

    Calling it again replaces the open dialog.
    """

    ACTION = "guiAddCards"

    note: NewNote


class GuiEditNote(AnkiAction[None]):
    """Open the Edit dialog for a note."""

    ACTION = "guiEditNote"

    note: int


class GuiCurrentCardField(WireModel):
    """Field value of the card under review and its position."""

    value: str
    order: int


class GuiCurrentCard(WireModel):
    """Card shown in the reviewer."""

    answer: str
    question: str
    deck_name: str
    model_name: str
    field_order: int
    fields: dict[str, GuiCurrentCardField]
    template: str
    card_id: int
    buttons: list[int]
    next_reviews: list[str]


class GetGuiCurrentCard(AnkiAction[GuiCurrentCard | None]):
    """Current card, or None outside review mode."""

    ACTION = "guiCurrentCard"


class GuiStartCardTimer(AnkiAction[bool]):
    """Start or reset the answer timer of the current card."""

    ACTION = "guiStartCardTimer"


class GuiShowQuestion(AnkiAction[bool]):
    """Show the question side; False outside review mode."""

    ACTION = "guiShowQuestion"


class GuiShowAnswer(AnkiAction[bool]):
    """Show the answer side; False outside review mode."""

    ACTION = "guiShowAnswer"


class GuiAnswerCard(AnkiAction[bool]):
    """Answer the current card with an ease button (1-4). The answer must be shown first."""

    ACTION = "guiAnswerCard"

    ease: int


class GuiDeckOverview(AnkiAction[bool]):
    """Open the overview screen of a deck."""

    ACTION = "guiDeckOverview"

    name: str


class GuiDeckBrowser(AnkiAction[None]):
    """Open the deck list."""

    ACTION = "guiDeckBrowser"


class GuiDeckReview(AnkiAction[bool]):
    """Start reviewing a deck."""

    ACTION = "guiDeckReview"

    name: str


class GuiExitAnki(AnkiAction[None]):
    """Ask Anki to close. Returns immediately, before Anki exits."""

    ACTION = "guiExitAnki"


class GuiCheckDatabase(AnkiAction[bool]):
    """Start a database check. Always True, the check runs in the background."""

    ACTION = "guiCheckDatabase"
