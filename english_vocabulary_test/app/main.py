import random
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from typer import Typer, Argument, Option

from english_vocabulary_test.app import get_service_factory
from english_vocabulary_test.app.cards import app as cards_app
from english_vocabulary_test.app.config import app as config_app
from english_vocabulary_test.error import EnglishVocabularyTestException

app = Typer(help="Make an English vocabulary exam from a card file.")
app.add_typer(cards_app, name="cards", help="Card file inspection commands")
app.add_typer(config_app, name="config", help="Configuration commands")


@app.command()
def make_exam(
    card_file: Path = Argument(
        ..., help="The card file to draw the problems from", dir_okay=False
    ),
    num_problem: int = Argument(..., help="The number of problems", min=0),
    seed: Optional[int] = Option(
        None, help="Seed for the random selection, makes the exam reproducible"
    ),
    compile_pdf: bool = Option(
        False, "--compile/--no-compile", help="Run latexmk on the generated files"
    ),
) -> None:
    """
    Creates an exam and its answer key as LaTeX files next to the card file.
    Cards with a higher priority are more likely to be asked.
    """
    service_factory = get_service_factory()
    card_file_service = service_factory.card_file_service()
    exam_builder_service = service_factory.exam_builder_service()

    try:
        card_list = card_file_service.load(card_file)
        paths = exam_builder_service.make_exam(
            card_file, card_list, num_problem, random.Random(seed)
        )
        if compile_pdf:
            latex_compiler = service_factory.latex_compiler()
            latex_compiler.compile(paths.exam_file)
            latex_compiler.compile(paths.answer_file)
    except EnglishVocabularyTestException as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(f"✅ Exam written to {paths.exam_file}")
    typer.echo(f"✅ Answers written to {paths.answer_file}")


if __name__ == "__main__":
    app()
