import tomllib
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from english_vocabulary_test.enums import CardFileFormat
from english_vocabulary_test.error import CardFileParseError, CardFileReadError
from english_vocabulary_test.model import CardList


class CardFileService:
    """
    Reads card files. A card file is a TOML document with one ``[[card]]``
    table per flashcard, or the equivalent JSON object with a ``card`` array.
    """

    @staticmethod
    def file_format(card_file: Path) -> CardFileFormat:
        if card_file.suffix.lower() == ".json":
            return CardFileFormat.json
        return CardFileFormat.toml

    def load(self, card_file: Path) -> CardList:
        logger.info(f"Reading cards from {card_file}")
        try:
            text = card_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CardFileReadError(f"failed to read {card_file}: {e}") from e

        try:
            card_list = self.loads(text, self.file_format(card_file))
        except CardFileParseError as e:
            raise CardFileParseError(f"failed to parse {card_file}: {e}") from e

        logger.info(f"Loaded {len(card_list)} cards from {card_file}")
        return card_list

    @staticmethod
    def loads(text: str, file_format: CardFileFormat = CardFileFormat.toml) -> CardList:
        try:
            if file_format == CardFileFormat.json:
                return CardList.model_validate_json(text)
            return CardList.model_validate(tomllib.loads(text))
        except (tomllib.TOMLDecodeError, ValidationError) as e:
            raise CardFileParseError(str(e)) from e
