from typing import List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import DataTable, Static

from aliasmenu.config import Config
from aliasmenu.menu import (
    KEY_BINDINGS,
    MenuCommand,
    MenuEvent,
    event_for_key,
    initialize,
    render,
    update,
)
from aliasmenu.models import AliasEntry, MenuState


def menu_text(state: MenuState, theme: dict) -> Text:
    """Styled version of render(state); the plain text is unchanged"""
    text = Text()
    lines = render(state).splitlines(keepends=True)
    for i, line in enumerate(lines):
        if i == 0:
            text.append(line, style=f"bold {theme['header_color']}")
        elif line.startswith(">"):
            text.append(line, style=f"bold {theme['cursor_color']}")
        else:
            text.append(line)
    return text


class AliasListScreen(ModalScreen):
    """Read-only table of the aliases loaded at startup"""

    CSS = """
    AliasListScreen {
        align: center middle;
        background: $background 80%;
    }

    #list-container {
        width: 90%;
        height: 80%;
        background: $surface;
        border: solid $primary-lighten-2;
    }

    #list-header {
        background: $primary;
        padding: 0 1;
        text-align: center;
        text-style: bold;
        color: $text;
    }

    #list-empty {
        padding: 1 2;
        color: $text-muted;
    }

    DataTable {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close", show=True),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(self, aliases: List[AliasEntry]):
        super().__init__()
        self.aliases = aliases

    def compose(self) -> ComposeResult:
        with Container(id="list-container"):
            yield Static(f"CURRENT ALIASES ({len(self.aliases)})", id="list-header")
            if self.aliases:
                yield DataTable(id="alias-table", cursor_type="row", zebra_stripes=True)
            else:
                yield Static("No aliases found", id="list-empty")

    def on_mount(self) -> None:
        if not self.aliases:
            return
        table = self.query_one("#alias-table", DataTable)
        table.add_column("Line", width=6)
        table.add_column("Alias", width=20)
        table.add_column("Command")
        for entry in self.aliases:
            # Text() keeps rich markup in commands from being interpreted
            table.add_row(
                str(entry.line_number),
                Text(entry.short_name, style="bold cyan"),
                Text(entry.unquoted_command),
            )
        table.focus()

    def action_close(self) -> None:
        self.dismiss()

    def action_cursor_down(self) -> None:
        if self.aliases:
            self.query_one("#alias-table", DataTable).action_cursor_down()

    def action_cursor_up(self) -> None:
        if self.aliases:
            self.query_one("#alias-table", DataTable).action_cursor_up()


def menu_bindings() -> List[Binding]:
    """One binding per entry in KEY_BINDINGS; quit keys win over every screen"""
    return [
        Binding(
            key,
            f"menu_key({key!r})",
            event.value.title(),
            show=False,
            priority=event is MenuEvent.QUIT,
        )
        for key, event in KEY_BINDINGS.items()
    ]


class MenuView(Static):
    """Static showing the rendered menu"""

    def __init__(self, state: MenuState, theme: dict, **kwargs):
        text = menu_text(state, theme)
        super().__init__(text, **kwargs)
        self.theme_colors = theme
        self.view_text = text

    def show(self, state: MenuState) -> None:
        self.view_text = menu_text(state, self.theme_colors)
        self.update(self.view_text)


class AliasMenu(App):
    """Cursor-driven menu over the loaded aliases"""

    TITLE = "aliasmenu"

    CSS = """
    Screen {
        background: $surface-darken-2;
    }

    #menu {
        margin: 1 2;
    }
    """

    BINDINGS = menu_bindings()

    def __init__(
        self,
        aliases: Optional[List[AliasEntry]] = None,
        config: Optional[Config] = None,
        skipped: int = 0,
    ):
        super().__init__()
        self.aliases = list(aliases or [])
        self.skipped = skipped
        self.config = config or Config()
        self.theme_colors = self.config.get_theme()
        self.menu_state = initialize(header=self.config.get("header", ""))

    def compose(self) -> ComposeResult:
        yield MenuView(self.menu_state, self.theme_colors, id="menu")

    def on_mount(self) -> None:
        if self.skipped:
            self.notify(
                f"Skipped {self.skipped} alias line(s) without '='",
                severity="warning",
            )

    def handle_menu_event(self, event: MenuEvent) -> Optional[MenuCommand]:
        """Feed one event through the menu and act on the returned command"""
        # Only quitting reaches the menu while the alias list is open
        if event is not MenuEvent.QUIT and isinstance(self.screen, AliasListScreen):
            return None

        self.menu_state, command = update(self.menu_state, event)
        # The menu lives on the base screen, under any pushed modal
        self.screen_stack[0].query_one("#menu", MenuView).show(self.menu_state)

        if command is MenuCommand.QUIT:
            self.exit(return_code=0)
        elif command is MenuCommand.VIEW_ALIASES:
            self.push_screen(AliasListScreen(self.aliases))
        return command

    def action_menu_key(self, key: str) -> None:
        self.handle_menu_event(event_for_key(key))
