from enum import Enum


class OutputFormat(str, Enum):
    md = "md"
    json = "json"


class CardFileFormat(str, Enum):
    toml = "toml"
    json = "json"


class PartOfSpeech(Enum):
    """Meaning groups of a card, in the order they are printed on the exam."""

    NOUN = ("noun", "名詞")
    ADJECTIVE = ("adjective", "形容詞")
    VERB = ("verb", "動詞")
    ADVERB = ("adverb", "副詞")
    PREPOSITION = ("preposition", "前置詞")

    def __init__(self, field_name: str, label: str) -> None:
        self.field_name = field_name
        self.label = label


class LoggerLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
