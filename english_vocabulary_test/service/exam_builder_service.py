from dataclasses import dataclass
from pathlib import Path
from random import Random
from typing import Callable, List

from loguru import logger

from english_vocabulary_test.constants import ANSWER_FILE_TEMPLATE, EXAM_FILE_TEMPLATE
from english_vocabulary_test.model import Card, CardList
from english_vocabulary_test.service.sampler import select_cards
from english_vocabulary_test.settings import EnglishVocabularyTestSettings


@dataclass
class ExamPaths:
    exam_file: Path
    answer_file: Path


class ExamBuilderService:
    """
    Builds the exam and its answer key as LaTeX documents and saves them next
    to the card file they were drawn from.
    """

    _DOCUMENT_TEMPLATE = r"""\documentclass[a4paper,11pt]{{jsarticle}}
\usepackage[top=4truecm,bottom=2truecm,left=2truecm,right=2truecm]{{geometry}}
\pagestyle{{empty}}
\renewcommand{{\labelenumi}}{{(\arabic{{enumi}})}}
\begin{{document}}
\begin{{enumerate}}
  \setlength{{\itemsep}}{{{item_sep}}}
{items}\end{{enumerate}}
\end{{document}}
"""

    _QUESTION_ITEM_SEP = "2truecm"
    _ANSWER_ITEM_SEP = "0.5truecm"

    def __init__(self, settings: EnglishVocabularyTestSettings):
        self.settings = settings

    def exam_paths(self, card_file: Path) -> ExamPaths:
        card_file = card_file.resolve()
        output_dir = (
            self.settings.output_dir.resolve()
            if self.settings.output_dir
            else card_file.parent
        )
        return ExamPaths(
            exam_file=output_dir / EXAM_FILE_TEMPLATE.format(stem=card_file.stem),
            answer_file=output_dir / ANSWER_FILE_TEMPLATE.format(stem=card_file.stem),
        )

    def build_question_document(self, cards: List[Card]) -> str:
        return self._build_document(
            cards, Card.render_question, self._QUESTION_ITEM_SEP
        )

    def build_answer_document(self, cards: List[Card]) -> str:
        return self._build_document(cards, Card.render_answer, self._ANSWER_ITEM_SEP)

    def make_exam(
        self,
        card_file: Path,
        card_list: CardList,
        num_problem: int,
        rng: Random,
    ) -> ExamPaths:
        """
        Select cards for an exam and write the question and answer documents.

        Args:
            card_file: Card file the cards were loaded from, names the outputs
            card_list: Loaded cards, empty ones are dropped in place
            num_problem: Requested number of questions
            rng: Random source used for the selection

        Returns:
            ExamPaths: Where the two documents were written
        """
        removed = card_list.drop_empty()
        if removed:
            logger.info(f"Dropped {removed} empty cards from {card_file}")

        if not card_list.cards:
            logger.warning(f"No usable cards in {card_file}, the exam will be empty")
        elif len(card_list) < num_problem:
            logger.warning(
                f"Requested {num_problem} problems but only {len(card_list)} cards are available"
            )

        cards = select_cards(card_list, num_problem, rng)
        logger.info(f"Selected {len(cards)} cards for the exam")

        paths = self.exam_paths(card_file)
        self._save_document(paths.exam_file, self.build_question_document(cards))
        self._save_document(paths.answer_file, self.build_answer_document(cards))
        return paths

    def _build_document(
        self, cards: List[Card], render: Callable[[Card], str], item_sep: str
    ) -> str:
        items = ""
        for i, card in enumerate(cards, start=1):
            items += f"  \\item\n    {render(card)}\n"
            if i % self.settings.problems_per_page == 0:
                items += "  \\clearpage\n"
        return self._DOCUMENT_TEMPLATE.format(item_sep=item_sep, items=items)

    @staticmethod
    def _save_document(file_path: Path, document: str) -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Saving {file_path}")
        file_path.write_text(document, encoding="utf-8")
        logger.info(f"Document saved: {file_path}")
