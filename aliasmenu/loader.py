"""Loader for aliases declared in ~/.bash_aliases"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from aliasmenu.models import AliasEntry, ALIAS_KEYWORD

logger = logging.getLogger(__name__)

ALIASES_FILENAME = ".bash_aliases"


class AliasLoadError(Exception):
    """Base class for fatal errors while loading the aliases file"""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class HomeDirectoryError(AliasLoadError):
    """The user's home directory could not be determined"""


class AliasFileOpenError(AliasLoadError):
    """The aliases file is missing or cannot be opened"""


class AliasFileReadError(AliasLoadError):
    """Reading the aliases file failed part way through"""


def parse_line(line: str, line_number: int = 0) -> Optional[AliasEntry]:
    """Parse one line, returning None unless it declares an alias.

    A line declares an alias when its first whitespace-delimited token is
    exactly ``alias``. The whole line is then split on its first '=':
    the left side (keyword included) is the name, the right side is the
    command, both kept verbatim.

    Raises ValueError for an alias line that has no '='.
    """
    tokens = line.split(None, 1)
    if not tokens or tokens[0] != ALIAS_KEYWORD:
        return None

    name, sep, command = line.partition("=")
    if not sep:
        raise ValueError(f"alias line has no '=': {line!r}")
    return AliasEntry(name=name, command=command, line_number=line_number)


class AliasLoader:
    """Read alias declarations from the user's aliases file"""

    def __init__(self, home_dir: Optional[Path] = None, filename: str = ALIASES_FILENAME):
        self.home_dir = home_dir
        self.filename = filename
        self.skipped: List[Tuple[int, str]] = []

    def resolve_path(self) -> Path:
        """Path of the aliases file inside the home directory"""
        home = self.home_dir
        if home is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError) as e:
                raise HomeDirectoryError(
                    f"Failed to get the user's home directory: {e}"
                ) from e
        return Path(home) / self.filename

    def load(self) -> List[AliasEntry]:
        """Load every alias entry, in file order"""
        path = self.resolve_path()
        self.skipped = []
        aliases: List[AliasEntry] = []

        try:
            f = open(path, "r")
        except OSError as e:
            raise AliasFileOpenError(f"Failed to open {path}: {e}", path) from e

        with f:
            try:
                for line_number, raw in enumerate(f, start=1):
                    line = raw.rstrip("\r\n")
                    try:
                        entry = parse_line(line, line_number)
                    except ValueError:
                        logger.warning(
                            "Skipping %s:%d, alias has no '=': %s",
                            path, line_number, line,
                        )
                        self.skipped.append((line_number, line))
                        continue
                    if entry is not None:
                        aliases.append(entry)
            except (OSError, UnicodeDecodeError) as e:
                raise AliasFileReadError(f"Failed to read {path}: {e}", path) from e

        logger.debug("Loaded %d aliases from %s", len(aliases), path)
        return aliases
