from pathlib import Path
from typing import Optional

import typer

from english_vocabulary_test.app import config_manager
from english_vocabulary_test.enums import LoggerLevel

app = typer.Typer()


@app.command()
def show() -> None:
    """
    Show the current settings.
    """
    settings = config_manager.read_settings()
    typer.echo(settings.model_dump_json(indent=4))


@app.command()
def get_settings_dir() -> None:
    """
    Get the settings directory path. This is where the settings are stored.
    """
    typer.echo(config_manager.config_dir)


@app.command()
def set_logging_level(
    logging_level: LoggerLevel = typer.Option(
        ...,
        prompt=True,
        case_sensitive=False,
        help="Logging level. E.g. DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
) -> None:
    """
    Set the logging level.
    """
    settings = config_manager.read_settings()
    settings.logger_level = logging_level.value
    config_manager.write_settings(settings)
    typer.echo(f"Logging level set to {settings.logger_level}")


@app.command()
def set_problems_per_page(
    problems_per_page: int = typer.Option(
        ..., prompt=True, min=1, help="Number of problems printed on one page"
    )
) -> None:
    """
    Set how many problems are printed before a page break.
    """
    settings = config_manager.read_settings()
    settings.problems_per_page = problems_per_page
    config_manager.write_settings(settings)
    typer.echo(f"Problems per page set to {problems_per_page}")


@app.command()
def set_output_dir(
    output_dir: Optional[Path] = typer.Option(
        None,
        help="Directory for the generated exams, next to the card file if not given",
    )
) -> None:
    """
    Set the output directory. Without a value the exams are written next to
    the card file.
    """
    settings = config_manager.read_settings()
    settings.output_dir = output_dir
    config_manager.write_settings(settings)
    if output_dir:
        typer.echo(f"Output directory set to {output_dir}")
    else:
        typer.echo("Exams will be written next to the card file")


@app.command()
def set_latexmk_command(
    latexmk_command: str = typer.Option(
        ..., prompt=True, help="Command used to compile the exams. E.g. latexmk"
    )
) -> None:
    """
    Set the command used by `make-exam --compile`.
    """
    settings = config_manager.read_settings()
    settings.latexmk_command = latexmk_command
    config_manager.write_settings(settings)
    typer.echo(f"latexmk command set to {latexmk_command}")
