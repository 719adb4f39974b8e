from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from english_vocabulary_test.constants import (
    MEANING_SEPARATOR,
    PHRASE_SUFFIX,
    SENTENCE_LABEL,
)
from english_vocabulary_test.enums import PartOfSpeech


def _tag(label: str, phrase: bool) -> str:
    return f"[{label}{PHRASE_SUFFIX if phrase else ''}]"


class Card(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    priority: int
    page: NonNegativeInt
    id: NonNegativeInt
    english: str
    sentence: Optional[str] = None
    is_phrase: bool = Field(default=False, alias="phrase")
    noun: Optional[list[str]] = None
    adjective: Optional[list[str]] = None
    verb: Optional[list[str]] = None
    adverb: Optional[list[str]] = None
    preposition: Optional[list[str]] = None

    def meanings(self, part_of_speech: PartOfSpeech) -> list[str]:
        return getattr(self, part_of_speech.field_name) or []

    def is_empty(self) -> bool:
        """
        A card without a sentence and without any meaning cannot be asked on
        an exam. The english term alone does not make a card usable.
        """
        if self.sentence:
            return False
        return not any(self.meanings(pos) for pos in PartOfSpeech)

    def _header(self) -> str:
        return f"p.{self.page}~\\#{self.id}"

    def render_question(self) -> str:
        question = self._header()
        if self.sentence:
            return f"{question} {_tag(SENTENCE_LABEL, False)} {self.sentence}"

        for pos in PartOfSpeech:
            meanings = self.meanings(pos)
            if meanings:
                question += (
                    f"  {_tag(pos.label, self.is_phrase)} "
                    f"{MEANING_SEPARATOR.join(meanings)}"
                )
        return question

    def render_answer(self) -> str:
        return f"{self._header()} {self.english}"


class CardList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cards: list[Card] = Field(default_factory=list, alias="card")

    def __len__(self) -> int:
        return len(self.cards)

    def drop_empty(self) -> int:
        """
        Remove empty cards in place, keeping the order of the remaining ones.

        Returns:
            int: Number of removed cards
        """
        kept = [card for card in self.cards if not card.is_empty()]
        removed = len(self.cards) - len(kept)
        self.cards[:] = kept
        return removed
