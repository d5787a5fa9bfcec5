"""Menu state machine: initialize, update and render"""

from dataclasses import replace
from enum import Enum
from typing import Dict, Optional, Tuple

from aliasmenu.models import MenuState, MENU_CHOICES


class MenuEvent(Enum):
    """Input events understood by the menu"""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    SELECT = "select"
    OTHER = "other"


class MenuCommand(Enum):
    """Follow-up commands returned to the runtime by update()"""

    QUIT = "quit"
    VIEW_ALIASES = "view_aliases"


# Key names as textual reports them; "space" is the literal space character
KEY_BINDINGS: Dict[str, MenuEvent] = {
    "ctrl+c": MenuEvent.QUIT,
    "q": MenuEvent.QUIT,
    "up": MenuEvent.UP,
    "k": MenuEvent.UP,
    "down": MenuEvent.DOWN,
    "j": MenuEvent.DOWN,
    "enter": MenuEvent.SELECT,
    "space": MenuEvent.SELECT,
}

# Commands issued when a choice is selected; choices not listed do nothing yet
SELECT_COMMANDS: Dict[str, MenuCommand] = {
    "View Current Aliases": MenuCommand.VIEW_ALIASES,
    "Exit": MenuCommand.QUIT,
}


def event_for_key(key: str) -> MenuEvent:
    """Map a key name to a menu event"""
    return KEY_BINDINGS.get(key, MenuEvent.OTHER)


def initialize(header: str = "") -> MenuState:
    """Starting state, cursor on the first choice"""
    return MenuState(header=header, choices=MENU_CHOICES, cursor=0)


def update(
    state: MenuState, event: MenuEvent
) -> Tuple[MenuState, Optional[MenuCommand]]:
    """Apply one event, returning the new state and an optional command"""
    if event is MenuEvent.QUIT:
        return state, MenuCommand.QUIT

    if event is MenuEvent.UP:
        if state.cursor > 0:
            return replace(state, cursor=state.cursor - 1), None
        return state, None

    if event is MenuEvent.DOWN:
        if state.cursor < len(state.choices) - 1:
            return replace(state, cursor=state.cursor + 1), None
        return state, None

    if event is MenuEvent.SELECT:
        return state, SELECT_COMMANDS.get(state.selected)

    return state, None


def render(state: MenuState) -> str:
    """Text view: header, blank line, then one line per choice"""
    s = state.header + "\n\n"
    for i, choice in enumerate(state.choices):
        cursor = ">" if state.cursor == i else " "
        s += f"{cursor} {choice}\n"
    return s
