import os
import random
import re

import pytest

from english_vocabulary_test.model import Card
from english_vocabulary_test.service.card_file_service import CardFileService
from english_vocabulary_test.service.exam_builder_service import ExamBuilderService
from english_vocabulary_test.settings import EnglishVocabularyTestSettings

HEADER_PATTERN = re.compile(r"^    (p\.\d+~\\#\d+)", re.MULTILINE)


@pytest.fixture
def service():
    return ExamBuilderService(EnglishVocabularyTestSettings())


def _cards(count):
    return [
        Card(priority=0, page=i, id=i, english=f"word{i}", noun=[f"meaning{i}"])
        for i in range(count)
    ]


def test_exam_paths_sit_next_to_card_file(service, card_file):
    paths = service.exam_paths(card_file)

    assert paths.exam_file == card_file.parent.resolve() / "exam_of_unit1.tex"
    assert paths.answer_file == card_file.parent.resolve() / "answer_of_unit1.tex"
    assert paths.exam_file.is_absolute()


def test_exam_paths_use_configured_output_dir(card_file, tmp_path):
    service = ExamBuilderService(
        EnglishVocabularyTestSettings(output_dir=tmp_path / "exams")
    )

    paths = service.exam_paths(card_file)

    assert paths.exam_file.parent == (tmp_path / "exams").resolve()


def test_question_document_boilerplate(service):
    document = service.build_question_document(_cards(2))

    assert document.startswith("\\documentclass[a4paper,11pt]{jsarticle}\n")
    assert "\\renewcommand{\\labelenumi}{(\\arabic{enumi})}" in document
    assert "\\setlength{\\itemsep}{2truecm}" in document
    assert document.count("\\item\n") == 2
    assert "    p.1~\\#1  [名詞] meaning1\n" in document
    assert document.endswith("\\end{enumerate}\n\\end{document}\n")


def test_answer_document_lists_english_terms(service):
    document = service.build_answer_document(_cards(2))

    assert "    p.0~\\#0 word0\n" in document
    assert "    p.1~\\#1 word1\n" in document
    assert "meaning" not in document


def test_page_break_after_configured_number_of_problems():
    service = ExamBuilderService(EnglishVocabularyTestSettings(problems_per_page=2))

    document = service.build_question_document(_cards(5))

    assert document.count("\\clearpage") == 2
    items = document.split("\\clearpage")
    assert items[0].count("\\item\n") == 2
    assert items[1].count("\\item\n") == 2
    assert items[2].count("\\item\n") == 1


def test_default_page_break_every_ten_problems(service):
    assert service.build_question_document(_cards(10)).count("\\clearpage") == 1
    assert service.build_question_document(_cards(9)).count("\\clearpage") == 0


def test_make_exam_writes_matching_question_and_answer_files(service, card_file):
    card_list = CardFileService().load(card_file)
    cwd = os.getcwd()

    paths = service.make_exam(card_file, card_list, 2, random.Random(7))

    assert os.getcwd() == cwd
    exam = paths.exam_file.read_text(encoding="utf-8")
    answers = paths.answer_file.read_text(encoding="utf-8")
    question_headers = HEADER_PATTERN.findall(exam)
    assert len(question_headers) == 2
    assert question_headers == HEADER_PATTERN.findall(answers)


def test_make_exam_drops_empty_cards(service, card_file):
    card_list = CardFileService().load(card_file)

    paths = service.make_exam(card_file, card_list, 10, random.Random(0))

    assert len(card_list) == 3
    exam = paths.exam_file.read_text(encoding="utf-8")
    assert sorted(HEADER_PATTERN.findall(exam)) == [
        "p.12~\\#1",
        "p.12~\\#2",
        "p.13~\\#3",
    ]
    assert "blank" not in paths.answer_file.read_text(encoding="utf-8")


def test_make_exam_is_reproducible_with_seed(service, card_file):
    first = service.make_exam(
        card_file, CardFileService().load(card_file), 2, random.Random(42)
    )
    first_exam = first.exam_file.read_text(encoding="utf-8")

    second = service.make_exam(
        card_file, CardFileService().load(card_file), 2, random.Random(42)
    )

    assert second.exam_file.read_text(encoding="utf-8") == first_exam


def test_make_exam_with_only_empty_cards_writes_empty_exam(service, tmp_path):
    path = tmp_path / "empty.toml"
    path.write_text(
        '[[card]]\npriority = 1\npage = 1\nid = 1\nenglish = "a"\n', encoding="utf-8"
    )
    card_list = CardFileService().load(path)

    paths = service.make_exam(path, card_list, 3, random.Random(0))

    assert "\\item\n" not in paths.exam_file.read_text(encoding="utf-8")
    assert paths.answer_file.exists()
