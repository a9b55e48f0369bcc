"""Card actions: scheduling, suspension, search and card info."""

from typing import Literal

from pydantic import Field

from anki_bridge.action import AnkiAction, WireModel


class GetEaseFactors(AnkiAction[list[int]]):
    """Ease factor of each given card, in the same order."""

    ACTION = "getEaseFactors"

    cards: list[int]


class SetEaseFactors(AnkiAction[list[bool]]):
    """Set ease factors by card ID; one flag per card telling whether it existed."""

    ACTION = "setEaseFactors"

    cards: list[int]
    ease_factors: list[int]


class SetSpecificValueOfCard(AnkiAction[list[bool]]):
    """Set raw database values of a single card.

    Some keys are only accepted with ``warning_check`` set, since a wrong value
    can corrupt the collection.
    """

    ACTION = "setSpecificValueOfCard"

    card: int
    keys: list[str]
    new_values: list[str]
    warning_check: bool | None = Field(default=None, alias="warning_check")


class Suspend(AnkiAction[bool]):
    """Suspend cards; True if at least one card was not already suspended."""

    ACTION = "suspend"

    cards: list[int]


class Unsuspend(AnkiAction[bool]):
    """Unsuspend cards; True if at least one card was suspended."""

    ACTION = "unsuspend"

    cards: list[int]


class Suspended(AnkiAction[bool]):
    """Whether one card is suspended."""

    ACTION = "suspended"

    card: int


class AreSuspended(AnkiAction[list[bool | None]]):
    """Suspension flag per card, None for cards that do not exist."""

    ACTION = "areSuspended"

    cards: list[int]


class AreDue(AnkiAction[list[bool]]):
    """Due flag per card.

    Learning cards with an interval over 20 minutes are not due until the
    interval has passed, matching Anki's own reviewer.
    """

    ACTION = "areDue"

    cards: list[int]


class GetIntervals(AnkiAction[list[int]]):
    """Most recent interval per card. Negative values are seconds, positive are days."""

    ACTION = "getIntervals"

    cards: list[int]


class GetCompleteIntervals(AnkiAction[list[list[int]]]):
    """Full interval history per card (``getIntervals`` with ``complete``)."""

    ACTION = "getIntervals"

    cards: list[int]
    complete: Literal[True] = True


class FindCards(AnkiAction[list[int]]):
    """Card IDs matching a search query, without opening the browser."""

    ACTION = "findCards"

    query: str


class CardsToNotes(AnkiAction[list[int]]):
    """Unordered, de-duplicated note IDs of the given cards."""

    ACTION = "cardsToNotes"

    cards: list[int]


class CardModTime(WireModel):
    """Last modification time of a card."""

    card_id: int
    mod: int


class CardsModTime(AnkiAction[list[CardModTime]]):
    """Modification time per card; much cheaper than ``cardsInfo``."""

    ACTION = "cardsModTime"

    cards: list[int]


class CardField(WireModel):
    """Field value of a card and its position in the note type."""

    value: str
    order: int


class CardInfo(WireModel):
    """One entry of the ``cardsInfo`` result."""

    answer: str
    question: str
    deck_name: str
    model_name: str
    field_order: int
    fields: dict[str, CardField]
    css: str
    card_id: int
    interval: int
    note: int
    ord: int
    type_: int = Field(alias="type")
    queue: int
    due: int
    reps: int
    lapses: int
    left: int
    mod: int


class CardsInfo(AnkiAction[list[CardInfo]]):
    """Fields, rendered sides, note type, deck and scheduling data per card."""

    ACTION = "cardsInfo"

    cards: list[int]


class ForgetCards(AnkiAction[None]):
    """Reset cards to new."""

    ACTION = "forgetCards"

    cards: list[int]


class RelearnCards(AnkiAction[None]):
    """Put cards into relearning."""

    ACTION = "relearnCards"

    cards: list[int]
