import json
from pathlib import Path

import typer
from loguru import logger
from typer import Typer, Argument, Option

from english_vocabulary_test.app import get_service_factory
from english_vocabulary_test.enums import OutputFormat
from english_vocabulary_test.error import EnglishVocabularyTestException
from english_vocabulary_test.model import CardList
from english_vocabulary_test.service.sampler import priority_offset

app = Typer()


def _load_card_list(card_file: Path) -> CardList:
    service_factory = get_service_factory()
    try:
        return service_factory.card_file_service().load(card_file)
    except EnglishVocabularyTestException as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def show(
    card_file: Path = Argument(..., help="The card file to show"),
    answers: bool = Option(False, help="Show the answers instead of the questions"),
    format: OutputFormat = Option("md", help="The format of the output"),
) -> None:
    """
    Show every usable card as it would be printed on the exam.

    E.g. Show the answer side of `unit1.toml` as json:
    > cards show unit1.toml --answers --format json
    """
    card_list = _load_card_list(card_file)
    card_list.drop_empty()
    if not card_list.cards:
        typer.echo("No usable cards found", err=True)
        return

    if format == OutputFormat.json:
        typer.echo(
            json.dumps(
                [
                    {
                        "page": card.page,
                        "id": card.id,
                        "priority": card.priority,
                        "text": card.render_answer()
                        if answers
                        else card.render_question(),
                    }
                    for card in card_list.cards
                ],
                ensure_ascii=False,
            )
        )
    elif format == OutputFormat.md:
        for card in card_list.cards:
            typer.echo(card.render_answer() if answers else card.render_question())
    else:
        raise NotImplementedError(f"Output format {format} not implemented")


@app.command()
def describe(
    card_file: Path = Argument(..., help="The card file to describe"),
) -> None:
    """
    Describe a card file
    """
    card_list = _load_card_list(card_file)
    total = len(card_list)
    empty = card_list.drop_empty()
    typer.echo(f"File: {card_file}")
    typer.echo(f"Cards: {total}")
    typer.echo(f"Empty cards: {empty}")
    if not card_list.cards:
        return

    priorities = [card.priority for card in card_list.cards]
    typer.echo(f"Priority: {min(priorities)}..{max(priorities)}")
    typer.echo(f"Priority offset: {priority_offset(card_list.cards)}")
