from unittest import mock

import pygame
import pytest

from angine.components import ComponentManager
from angine.game import DebugScene, GameLoop, SceneType, main
from angine.scene import WindowData

QUIT = "quit"


class FakeBackend:
    def __init__(self, frames=0):
        self.frames = frames
        self.rendered = 0

    def events(self):
        if self.frames:
            self.frames -= 1
            return []
        return [QUIT]

    def is_quit(self, event):
        return event == QUIT

    def pressed_buttons(self):
        return set()

    def prepare_render(self):
        return True

    def begin_render(self):
        return True

    def render(self):
        self.rendered += 1

    def end_render(self):
        pass

    def error(self):
        return ""

    def close(self):
        pass


def test_scene_types():
    members = list(SceneType)
    assert [t.name for t in members] == ["DEBUG", "GAMEPLAY", "MENU"]
    assert SceneType["GAMEPLAY"] is members[1]
    assert SceneType(members[2].value) is SceneType["MENU"]
    with pytest.raises(KeyError):
        SceneType["PAUSE"]


def test_debug_scene_tree():
    scene = DebugScene(ComponentManager(), WindowData())
    top = scene.root.children
    assert [obj.name for obj in top] == ["Bibboop", "Bibboop2"]
    assert [obj.name for obj in top[1].children] == ["ChildOfBibboop2"]
    assert top[0].children == ()
    assert top[1].children[0].parent is top[1]


def test_debug_scene_identity():
    scene = DebugScene(ComponentManager(), WindowData())
    assert scene.name() == "DebugScene"
    assert scene.next_scene() is None


def test_debug_scene_ids_are_distinct():
    scene = DebugScene(ComponentManager(), WindowData())
    ids = {scene.root.id}
    for obj in scene.root.children:
        ids.add(obj.id)
        ids.update(child.id for child in obj.children)
    assert len(ids) == 4


def test_game_loop_loads_debug_scene():
    game = GameLoop(FakeBackend())
    game.scene_handler.create_and_set_scene(DebugScene)
    assert game.current_scene.name() == "DebugScene"


def test_game_loop_runs_until_quit():
    backend = FakeBackend(frames=3)
    game = GameLoop(backend)
    assert game.run() is True
    assert backend.rendered == 3


def test_main_runs_until_window_closed(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]), mock.patch(
        "pygame.get_error", return_value=""
    ):
        assert main([]) == 1


def test_main_reports_initialisation_failure(monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with mock.patch("pygame.get_error", return_value="no video"):
        assert main([]) == -1
    assert capsys.readouterr().out == "Failed to initialize: no video\n"