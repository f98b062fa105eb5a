"""
Tests for routing between the home menu and the tools
"""
import pytest

from navigation import Navigator


class FakeView:
    def __init__(self, name, on_dismiss):
        self.name = name
        self.on_dismiss = on_dismiss
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def nav():
    homes = []
    navigator = Navigator(on_home=lambda: homes.append(True))
    navigator.homes = homes
    for name in ("Recipes", "Calculator", "Budget"):
        navigator.register(name, lambda dismiss, name=name: FakeView(name, dismiss))
    return navigator


def test_menu_lists_three_tools_in_order(nav):
    assert [name for name, _, _ in nav.menu()] == ["Recipes", "Calculator", "Budget"]


def test_menu_skips_unregistered_tools():
    navigator = Navigator()
    navigator.register("Budget", lambda dismiss: None)
    assert [name for name, _, _ in navigator.menu()] == ["Budget"]


def test_open_routes_to_selected_tool(nav):
    assert nav.is_home()
    view = nav.open("Calculator")
    assert view.name == "Calculator"
    assert nav.current == "Calculator"
    assert not nav.is_home()


def test_view_receives_dismiss_callback(nav):
    view = nav.open("Budget")
    view.on_dismiss()
    assert view.closed
    assert nav.is_home()
    assert nav.homes == [True]


def test_unknown_page(nav):
    with pytest.raises(KeyError):
        nav.open("Settings")
    assert nav.is_home()
