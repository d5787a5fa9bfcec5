import json
from unittest.mock import patch

import pytest

from aliasmenu.config import Config
from aliasmenu.menu import KEY_BINDINGS, MenuCommand, MenuEvent, render
from aliasmenu.models import AliasEntry, MenuState
from aliasmenu.tui import AliasListScreen, AliasMenu, MenuView, menu_text
from textual.widgets import DataTable


def test_menu_text_matches_render(config):
    state = MenuState(header="Aliases", cursor=2)
    text = menu_text(state, config.get_theme())
    assert text.plain == render(state)


@pytest.mark.asyncio
async def test_navigation(alias_entries, config):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down", "j", "j")
        assert app.menu_state.cursor == 3

        # clamped at the bottom
        await pilot.press("down")
        assert app.menu_state.cursor == 3

        await pilot.press("up", "k", "k", "k", "up")
        assert app.menu_state.cursor == 0

        await pilot.press("x", "left")
        assert app.menu_state.cursor == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["q", "ctrl+c"])
async def test_quit_keys(alias_entries, config, key):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down")
        await pilot.press(key)

    assert app.return_code == 0


@pytest.mark.asyncio
async def test_select_exit(alias_entries, config):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down", "down", "down", "enter")

    assert app.return_code == 0


@pytest.mark.asyncio
async def test_select_stub_choices_do_nothing(alias_entries, config):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("enter")
        await pilot.press("down", "space")
        await pilot.pause()

        assert app.menu_state.cursor == 1
        assert not isinstance(app.screen, AliasListScreen)
        assert app.is_running


@pytest.mark.asyncio
async def test_view_current_aliases(alias_entries, config):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down", "down", "enter")
        await pilot.pause()

        assert isinstance(app.screen, AliasListScreen)
        table = app.screen.query_one("#alias-table", DataTable)
        assert table.row_count == 2

        # menu keys do not move the menu cursor behind the list
        await pilot.press("j", "space")
        await pilot.pause()
        assert app.menu_state.cursor == 2
        assert isinstance(app.screen, AliasListScreen)

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, AliasListScreen)

        await pilot.press("up")
        assert app.menu_state.cursor == 1


@pytest.mark.asyncio
async def test_view_current_aliases_empty(config):
    app = AliasMenu([], config)

    async with app.run_test(size=(80, 24)) as pilot:
        app.handle_menu_event(MenuEvent.DOWN)
        app.handle_menu_event(MenuEvent.DOWN)
        command = app.handle_menu_event(MenuEvent.SELECT)
        await pilot.pause()

        assert command is MenuCommand.VIEW_ALIASES
        assert isinstance(app.screen, AliasListScreen)
        assert len(app.screen.query("#list-empty")) == 1
        assert len(app.screen.query(DataTable)) == 0



def test_bindings_follow_key_table():
    bound = {binding.key: binding for binding in AliasMenu.BINDINGS}

    assert set(bound) == set(KEY_BINDINGS)
    for key, event in KEY_BINDINGS.items():
        assert bound[key].action == f"menu_key({key!r})"
        assert bound[key].priority == (event is MenuEvent.QUIT)


@pytest.mark.asyncio
async def test_menu_margin_and_view(alias_entries, config):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        view = app.query_one("#menu", MenuView)
        assert tuple(view.styles.margin) == (1, 2, 1, 2)
        assert view.view_text.plain == render(app.menu_state)

        await pilot.press("down")
        assert app.menu_state.cursor == 1
        assert view.view_text.plain == render(app.menu_state)
        assert "> Delete Aliases\n" in view.view_text.plain


@pytest.mark.asyncio
async def test_header_from_config(alias_entries, config):
    config.config["header"] = "My aliases"
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)):
        assert app.menu_state.header == "My aliases"
        view = app.query_one("#menu", MenuView)
        assert view.view_text.plain.startswith("My aliases\n\n> Create New Alias\n")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "user_config", [{"header": None}, {"theme": ["ocean"]}]
)
async def test_wrong_typed_config_uses_defaults(alias_entries, tmp_path, user_config):
    config_dir = tmp_path / ".aliasmenu"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps(user_config))
    app = AliasMenu(alias_entries, Config(config_dir=config_dir))

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down")
        view = app.query_one("#menu", MenuView)
        assert view.view_text.plain == render(MenuState(cursor=1))


@pytest.mark.asyncio
async def test_quit_from_alias_list(alias_entries, config):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down", "down", "enter")
        await pilot.pause()
        assert isinstance(app.screen, AliasListScreen)
        await pilot.press("q")

    assert app.return_code == 0


@pytest.mark.asyncio
async def test_alias_list_shows_unquoted_command(config):
    entries = [AliasEntry(name="alias gs", command="'git status'", line_number=1)]
    app = AliasMenu(entries, config)

    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.press("down", "down", "enter")
        await pilot.pause()

        table = app.screen.query_one("#alias-table", DataTable)
        row = table.get_row_at(0)
        assert str(row[1]) == "gs"
        assert str(row[2]) == "git status"


@pytest.mark.asyncio
@patch.object(AliasMenu, "notify")
async def test_skipped_lines_notified(mock_notify, alias_entries, config):
    app = AliasMenu(alias_entries, config, skipped=2)

    async with app.run_test(size=(80, 24)):
        mock_notify.assert_called_once_with(
            "Skipped 2 alias line(s) without '='", severity="warning"
        )


@pytest.mark.asyncio
@patch.object(AliasMenu, "notify")
async def test_no_notification_without_skipped_lines(mock_notify, alias_entries, config):
    app = AliasMenu(alias_entries, config)

    async with app.run_test(size=(80, 24)):
        mock_notify.assert_not_called()
