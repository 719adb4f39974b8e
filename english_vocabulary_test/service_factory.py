from dataclasses import dataclass
from functools import cache

from english_vocabulary_test.service.card_file_service import CardFileService
from english_vocabulary_test.service.exam_builder_service import ExamBuilderService
from english_vocabulary_test.service.latex_compiler import LatexCompiler
from english_vocabulary_test.settings import EnglishVocabularyTestSettings


@dataclass
class ServiceFactoryConfig:
    settings: EnglishVocabularyTestSettings


class ServiceFactory:
    def __init__(self, config: ServiceFactoryConfig) -> None:
        self.config = config

    @cache
    def card_file_service(self) -> CardFileService:
        return CardFileService()

    @cache
    def exam_builder_service(self) -> ExamBuilderService:
        return ExamBuilderService(settings=self.config.settings)

    @cache
    def latex_compiler(self) -> LatexCompiler:
        return LatexCompiler(latexmk_command=self.config.settings.latexmk_command)
