APP_NAME = "english-vocabulary-test"

EXAM_FILE_TEMPLATE = "exam_of_{stem}.tex"
ANSWER_FILE_TEMPLATE = "answer_of_{stem}.tex"

MEANING_SEPARATOR = "、"
SENTENCE_LABEL = "文章"
PHRASE_SUFFIX = "節"
