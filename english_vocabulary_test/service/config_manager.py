from pathlib import Path

from appdirs import user_config_dir

from english_vocabulary_test.constants import APP_NAME
from english_vocabulary_test.settings import EnglishVocabularyTestSettings


class ConfigManager:
    def __init__(self) -> None:
        self.config_dir = Path(user_config_dir(appname=APP_NAME))

    @property
    def settings_path(self) -> Path:
        return self.config_dir / "settings.json"

    def read_settings(self) -> EnglishVocabularyTestSettings:
        if not self.settings_path.exists():
            return EnglishVocabularyTestSettings()

        with open(self.settings_path, "r", encoding="utf-8") as file:
            return EnglishVocabularyTestSettings.model_validate_json(file.read())

    def write_settings(self, settings: EnglishVocabularyTestSettings) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.settings_path, "w", encoding="utf-8") as file:
            file.write(settings.model_dump_json(indent=4))
