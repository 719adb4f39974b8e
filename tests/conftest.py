import subprocess
from pathlib import Path

import pytest

import english_vocabulary_test.app as app_package
from english_vocabulary_test.model import Card, CardList
from english_vocabulary_test.service import latex_compiler as lc

CARD_FILE_TOML = """\
[[card]]
priority = 3
page = 12
id = 1
english = "run"
noun = ["走ること"]
verb = ["走る", "経営する"]

[[card]]
priority = -1
page = 12
id = 2
english = "run out of"
phrase = true
verb = ["使い果たす"]

[[card]]
priority = 0
page = 13
id = 3
english = "fast"
sentence = "He ran fast."

[[card]]
priority = 5
page = 14
id = 4
english = "blank"
"""


@pytest.fixture
def card_file(tmp_path) -> Path:
    path = tmp_path / "unit1.toml"
    path.write_text(CARD_FILE_TOML, encoding="utf-8")
    return path


@pytest.fixture
def make_card_list():
    def _make(priorities):
        return CardList(
            cards=[
                Card(priority=p, page=1, id=i, english=f"word{i}", noun=[f"meaning{i}"])
                for i, p in enumerate(priorities)
            ]
        )

    return _make


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setattr(app_package.config_manager, "config_dir", config_dir)
    return config_dir


class FakeRun:
    def __init__(self, returncode=0, error=None):
        self.returncode = returncode
        self.error = error
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs["cwd"]))
        if self.error:
            raise self.error
        return subprocess.CompletedProcess(command, self.returncode, "out", "")


@pytest.fixture
def fake_run(monkeypatch):
    def _install(returncode=0, error=None):
        run = FakeRun(returncode=returncode, error=error)
        monkeypatch.setattr(lc.subprocess, "run", run)
        return run

    return _install
