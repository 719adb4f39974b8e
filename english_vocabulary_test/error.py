class EnglishVocabularyTestException(Exception):
    pass


class CardFileReadError(EnglishVocabularyTestException):
    """The card file could not be read from disk."""


class CardFileParseError(EnglishVocabularyTestException):
    """The card file was read but its content is malformed."""


class ExamCompilationError(EnglishVocabularyTestException):
    pass
