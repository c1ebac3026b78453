import pytest

tk = pytest.importorskip("tkinter")

from app import CircleBoardApp


@pytest.fixture
def app():
    try:
        app = CircleBoardApp()
    except tk.TclError:
        pytest.skip("no display available")
    app.root.withdraw()
    yield app
    app.root.destroy()


def test_delete_key_removes_selected_circle(app, monkeypatch):
    app.controller.select_or_create(50, 50)
    monkeypatch.setattr(app.root, "focus_get", lambda: app.canvas_view.canvas)

    app._on_delete_shortcut(None)

    assert app.board.circles == []
    assert app.position_var.get() == "Position: N/A"


def test_delete_key_ignored_while_radius_entry_focused(app, monkeypatch):
    app.controller.select_or_create(50, 50)
    monkeypatch.setattr(app.root, "focus_get", lambda: app.radius_entry)

    app._on_delete_shortcut(None)

    assert len(app.board.circles) == 1
    assert app.board.selected_index == 0


def test_info_panel_tracks_selection(app):
    app.radius_var.set("30")
    app._set_color("#00ff00")

    app.controller.select_or_create(50, 50)

    assert app.position_var.get() == "Position: (50, 50)"
    assert app.radius_info_var.get() == "Radius: 30"
    assert app.color_info_var.get() == "Color: #00ff00"
    assert app.status_var.get() == "Circles: 1  |  Selected"
