from pathlib import Path
from typing import List

import pytest

from aliasmenu.config import Config
from aliasmenu.models import AliasEntry


SAMPLE_ALIASES = """\
alias gs=git status
alias ll=ls -la
# comment
export EDITOR=vim
"""


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Temporary home directory, also used by Path.home()"""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def aliases_file(home) -> Path:
    path = home / ".bash_aliases"
    path.write_text(SAMPLE_ALIASES)
    return path


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(config_dir=tmp_path / ".aliasmenu")


@pytest.fixture
def alias_entries() -> List[AliasEntry]:
    return [
        AliasEntry(name="alias gs", command="git status", line_number=1),
        AliasEntry(name="alias ll", command="ls -la", line_number=2),
    ]
