"""Deck actions: names, membership, creation and configuration groups."""

from typing import Literal

from pydantic import ConfigDict, Field

from anki_bridge.action import AnkiAction, WireModel


class DeckNames(AnkiAction[list[str]]):
    """All deck names of the current profile."""

    ACTION = "deckNames"


class DeckNamesAndIds(AnkiAction[dict[str, int]]):
    """Deck name to deck ID."""

    ACTION = "deckNamesAndIds"


class GetDecks(AnkiAction[dict[str, list[int]]]):
    """Group the given card IDs by the deck they belong to."""

    ACTION = "getDecks"

    cards: list[int]


class CreateDeck(AnkiAction[int]):
    """Create an empty deck and return its ID. An existing deck is left untouched."""

    ACTION = "createDeck"

    deck: str


class ChangeDeck(AnkiAction[None]):
    """Move cards to a deck, creating it if needed."""

    ACTION = "changeDeck"

    cards: list[int]
    deck: str


class DeleteDecks(AnkiAction[None]):
    """Delete decks by name. AnkiConnect requires ``cards_too`` to be True."""

    ACTION = "deleteDecks"

    decks: list[str]
    cards_too: bool = True


class DeckConfigNew(WireModel):
    """New-card settings of a configuration group."""

    bury: bool = False
    delays: list[float] = []
    initial_factor: int = 0
    ints: list[int] = []
    order: int = 0
    per_day: int = 0


class DeckConfigLapse(WireModel):
    """Lapse settings of a configuration group."""

    delays: list[float] = []
    leech_action: int = 0
    leech_fails: int = 0
    min_int: int = 0
    mult: float = 0.0


class DeckConfigRev(WireModel):
    """Review settings of a configuration group."""

    bury: bool = False
    ease4: float = 0.0
    ivl_fct: float = 0.0
    max_ivl: int = 0
    per_day: int = 0
    hard_factor: float = 0.0


class DeckConfig(WireModel):
    """Configuration group, as returned by ``getDeckConfig`` and sent back by ``saveDeckConfig``.

    Keys not listed here are kept, so a get-then-save round trip preserves settings added by newer Anki versions.
    """

    model_config = ConfigDict(extra="allow")

    autoplay: bool = False
    bury_interday_learning: bool = False
    dyn: bool = False
    id: int = 0
    lapse: DeckConfigLapse = Field(default_factory=DeckConfigLapse)
    max_taken: int = 0
    mod: int = 0
    name: str = ""
    new: DeckConfigNew = Field(default_factory=DeckConfigNew)
    new_gather_priority: int = 0
    new_mix: int = 0
    new_per_day_minimum: int = 0
    new_sort_order: int = 0
    replayq: bool = False
    rev: DeckConfigRev = Field(default_factory=DeckConfigRev)
    review_order: int = 0
    timer: int = 0
    usn: int = 0


class GetDeckConfig(AnkiAction[DeckConfig]):
    """Configuration group of a deck."""

    ACTION = "getDeckConfig"

    deck: str


class SaveDeckConfig(AnkiAction[bool]):
    """Save a configuration group; False if its ID does not exist."""

    ACTION = "saveDeckConfig"

    config: DeckConfig


class SetDeckConfigId(AnkiAction[bool]):
    """Assign a configuration group to decks; False if the group or a deck does not exist."""

    ACTION = "setDeckConfigId"

    decks: list[str]
    config_id: int


class CloneDeckConfigId(AnkiAction[int | Literal[False]]):
    """Clone a configuration group (the default one if ``clone_from`` is unset).

    Returns the new group ID, or False when the source group does not exist. An empty response reads as 0.
    """

    ACTION = "cloneDeckConfigId"

    name: str
    clone_from: int | None = None


class RemoveDeckConfigId(AnkiAction[bool]):
    """Remove a configuration group; False for the default group (ID 1) or a missing one."""

    ACTION = "removeDeckConfigId"

    config_id: int


class DeckStats(WireModel):
    """Card counts of one deck, as returned by ``getDeckStats``."""

    # getDeckStats answers in snake_case
    model_config = ConfigDict(alias_generator=None)

    deck_id: int
    name: str
    new_count: int
    learn_count: int
    review_count: int
    total_in_deck: int


class GetDeckStats(AnkiAction[dict[str, DeckStats]]):
    """Card counts per deck, keyed by deck ID."""

    ACTION = "getDeckStats"

    decks: list[str]
