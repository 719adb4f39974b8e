from pathlib import Path
from typing import Literal, Optional

from pydantic import PositiveInt
from pydantic_settings import BaseSettings


class EnglishVocabularyTestSettings(BaseSettings):
    logger_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    problems_per_page: PositiveInt = 10
    output_dir: Optional[Path] = None
    latexmk_command: str = "latexmk"
