# angine

A small component-based 2D game engine built on pygame. Game objects form a
tree, each object can carry components (input, movement, sprite) kept by a
shared `ComponentManager`, and scenes own a root object that everything else
hangs from. A debug scene and a game loop come with the package.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the game

```
angine-game
```

This opens a resizable 1920×1080 pygame window and runs frames until the
window is closed. After the window is opened, if pygame reports an error the
command prints `Failed to initialize: <error>` and exits with a non-zero
status.

## Modules

- `angine.input`: `Button` (`FIRE`, `LEFT`, `RIGHT`) and `ButtonState`
  (`PRESSED`, `HELD`, `RELEASED`, `NONE`). `InputHandler.update(pressed)`
  records which buttons are down this frame and `InputHandler.swap()` ends the
  frame. `InputWatcher` answers `button_state`, `is_pressed`, `is_holding`
  and `is_released`. All watchers share one set of button states for the
  process. Querying a button before any `InputHandler` has been created
  raises `KeyError`.
- `angine.mathutils`: the immutable `Vec2` (addition, subtraction, scaling,
  `abs()` for length, `normalized()`) and `is_zero(vec, epsilon=1e-6)`.
  Normalising a zero vector gives NaN components.
- `angine.debug`: `OverlordItem`, an abstract base for debug tools with
  `render()`, `name()`, a `visible` flag, `toggle_visible()` and
  `set_visible()`.
- `angine.components`: the `Component` base and the classes built on it:
  - `InputComponent` calls its fire, left or right callback with
    `(manager, owner_id, state)` whenever that button's state is not `NONE`.
  - `MovementComponent` moves its owner by
    `direction * acceleration * delta_time` and refreshes the sprites of the
    owner's subtree.
  - `SpriteComponent` holds an optional text, its size and the owner's world
    position.

  `ComponentManager` keeps one packed pool per component type. It provides
  `get_component`, `has_component`, `remove_component`, `remove_components`,
  the `add_*_component` methods, and `update`, which runs input, then
  movement, then sprite components.
- `angine.game_object`: `GameObject` trees with local and world positions,
  `remove_child`, `remove_children`, `destroy_self` and `set_parent`.
  Destroying an object removes the components of its whole subtree.
  `GameObjectBuilder.create_builder(name, parent)` returns an
  `ObjectBuilder`. Its chainable `add_text`, `add_sprite`,
  `add_movement_data`, `add_input_info(InputCallbacks(...))` and
  `set_local_position` end in `build()`, which attaches the object to its
  parent. Object ids come from one counter shared across the process.
- `angine.scene`: `WindowData` (1240×720 by default) and `AbstractScene`.
  Subclass `AbstractScene` and provide `update`, `next_scene` and `name`.
  `SceneHandler.create_and_set_scene(scene_type, *args)` builds a scene with
  the shared manager and window data and makes it current. It raises
  `TypeError` for a type that is not a scene.
- `angine.engine_loop`: `Inputs.poll()` drains events and returns `False` at
  a quit event. `EngineLoop` is an abstract loop; subclass it and provide
  `game_loop`. `check_initialised()` raises `RuntimeError` if pygame reported
  an error. `run(max_frames=None)` polls events, samples the space and arrow
  keys, clears the window to black and flips it each frame. `close()` shuts
  the display down.
- `angine.game`: `SceneType`, the `DebugScene` (objects `Bibboop`,
  `Bibboop2` and its child `ChildOfBibboop2`), the `GameLoop`, and the `main`
  function behind `angine-game`.

## Writing a scene

```python
from angine.scene import AbstractScene


class MyScene(AbstractScene):
    def __init__(self, component_manager, window_data):
        super().__init__(component_manager, window_data)
        paddle = (
            self.create_game_object_builder("Paddle")
            .add_movement_data(300.0)
            .build()
        )
        self.create_game_object_builder("PaddleLabel", paddle).build()

    def update(self, delta_time):
        pass

    def next_scene(self):
        return None

    def name(self):
        return "MyScene"
```

`engine.scene_handler.create_and_set_scene(MyScene)` makes it the engine's
current scene.

## What it does not do

- `EngineLoop.run` does not call `game_loop`, the current scene's `update`
  or `ComponentManager.update`. Code that wants those per-frame steps has to
  call them itself.
- Nothing is drawn apart from the cleared window. `SpriteComponent` only
  records text and position, and there is no on-screen debug overlay that
  shows `OverlordItem`s.
- There is no playable game. The command opens a window with no scene
  loaded.
- The frame time in `last_delta_time` is measured in whole seconds.