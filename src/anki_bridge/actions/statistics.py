"""Statistic actions: review history."""

from typing import Any

from pydantic import Field, model_validator

from anki_bridge.action import AnkiAction, WireModel


class CardReview(WireModel):
    """One review log row. AnkiConnect sends it as a positional array in this field order."""

    review_time: int
    card_id: int
    usn: int
    button_pressed: int
    new_interval: int
    previous_interval: int
    new_factor: int
    review_duration: int
    review_type: int

    @model_validator(mode="before")
    @classmethod
    def from_row(cls, data: Any) -> Any:
        if isinstance(data, list | tuple):
            names = list(cls.model_fields)
            if len(data) != len(names):
                msg = f"expected {len(names)} columns, got {len(data)}"
                raise ValueError(msg)
            return dict(zip(names, data, strict=True))
        return data


class CardReviews(AnkiAction[list[CardReview]]):
    """Reviews of a deck logged after a given review ID (a millisecond timestamp)."""

    ACTION = "cardReviews"

    deck: str
    start_id: int = Field(alias="startID")


class ReviewLog(WireModel):
    """One review log entry, as returned by ``getReviewsOfCards``."""

    id: int
    usn: int
    ease: int
    ivl: int
    last_ivl: int
    factor: int
    time: int
    type_: int = Field(alias="type")


class GetReviewsOfCards(AnkiAction[dict[str, list[ReviewLog]]]):
    """Review logs per card, keyed by card ID."""

    ACTION = "getReviewsOfCards"

    cards: list[int]
