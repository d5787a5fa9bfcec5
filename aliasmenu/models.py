"""Data models for aliases and the menu"""

from dataclasses import dataclass
from typing import Tuple

ALIAS_KEYWORD = "alias"

MENU_CHOICES: Tuple[str, ...] = (
    "Create New Alias",
    "Delete Aliases",
    "View Current Aliases",
    "Exit",
)


@dataclass(frozen=True)
class AliasEntry:
    """One alias line from the aliases file, split on its first '='"""
    name: str
    command: str
    line_number: int = 0

    @property
    def short_name(self) -> str:
        """Alias name without the leading 'alias' keyword"""
        head = self.name.strip()
        if head.split(None, 1)[:1] == [ALIAS_KEYWORD]:
            head = head[len(ALIAS_KEYWORD):]
        return head.strip()

    @property
    def unquoted_command(self) -> str:
        """Command with one pair of matching outer quotes removed"""
        cmd = self.command.strip()
        if len(cmd) >= 2 and cmd[0] == cmd[-1] and cmd[0] in "'\"":
            return cmd[1:-1]
        return cmd

    def __str__(self) -> str:
        """String representation, the original line"""
        return f"{self.name}={self.command}"


@dataclass(frozen=True)
class MenuState:
    """Cursor position over a fixed list of menu choices"""
    header: str = ""
    choices: Tuple[str, ...] = MENU_CHOICES
    cursor: int = 0

    def __post_init__(self):
        if not 0 <= self.cursor < len(self.choices):
            raise ValueError(
                f"cursor {self.cursor} out of range for {len(self.choices)} choices"
            )

    @property
    def selected(self) -> str:
        return self.choices[self.cursor]
