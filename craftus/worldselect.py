"""World selection menu: listing, creating and deleting saved worlds."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterable

import msgpack

from craftus.gui import BUTTON_TEXT_PADDING, Gui
from craftus.mathutil import clamp
from craftus.spritebatch import CHAR_HEIGHT, INT16_MAX, NO_WRAP, GuiTexture
from craftus.vertexfmt import shader_rgb

CRAFTUS_VERSION_STR = "0.3 Pre 2"
WORLD_NAME_SIZE = 12
LEVEL_FILE = "level.mp"
MAX_VELOCITY = 20.0
FORBIDDEN_PATH_CHARS = frozenset("/\\?:|<>")

_DIM_COLOR = shader_rgb(12, 12, 12)
_FRAME_COLOR = shader_rgb(20, 20, 20)


class GameState(IntEnum):
    SELECT_WORLD = 0
    PLAYING = 1


class WorldGenType(IntEnum):
    SMEA = 0
    SUPER_FLAT = 1


WORLD_GEN_TYPE_NAMES = {WorldGenType.SMEA: "Smea", WorldGenType.SUPER_FLAT: "Superflat"}


class MenuState(IntEnum):
    SELECT_WORLD = 0
    CONFIRM_DELETION = 1
    WORLD_OPTIONS = 2


@dataclass(frozen=True)
class WorldInfo:
    name: str
    path: str
    last_played: int = 0


@dataclass(frozen=True)
class WorldSelectResult:
    """The world to play; ``gen_type`` is only chosen for new worlds."""

    path: str
    name: str
    gen_type: WorldGenType | None
    new_world: bool


def sanitize_world_path(name: str) -> str:
    """Replace characters not allowed in folder names with underscores."""
    return "".join("_" if c in FORBIDDEN_PATH_CHARS else c for c in name)


def unique_world_path(path: str, existing: Iterable[str]) -> str:
    """Append underscores to ``path`` until no existing world uses it."""
    taken = set(existing)
    while path in taken:
        path += "_"
    return path


def _read_world_name(level_file: Path) -> str | None:
    try:
        root = msgpack.unpackb(level_file.read_bytes(), raw=False)
    except (OSError, ValueError, msgpack.UnpackException):
        return None
    if not isinstance(root, dict):
        return None
    name = root.get("name")
    if not isinstance(name, str) or len(name.encode("utf-8")) >= WORLD_NAME_SIZE:
        return None
    return name


def scan_worlds(saves_dir: str | Path) -> list[WorldInfo]:
    """Saved worlds found in ``saves_dir``, sorted by folder name.

    Folders without a readable level file holding a name are skipped.
    """
    saves = Path(saves_dir)
    if not saves.is_dir():
        return []
    worlds = []
    for entry in sorted(saves.iterdir(), key=lambda p: p.name):
        level_file = entry / LEVEL_FILE
        if not level_file.is_file():
            continue
        name = _read_world_name(level_file)
        if name is not None:
            worlds.append(WorldInfo(name=name, path=entry.name))
    return worlds


def delete_folder(path: str | Path) -> None:
    """Remove a folder with everything in it."""
    shutil.rmtree(path)


class WorldSelect:
    """The menu shown before a world is played."""

    def __init__(
        self,
        gui: Gui,
        saves_dir: str | Path,
        prompt: Callable[[str], str | None] | None = None,
    ) -> None:
        self.gui = gui
        self.batch = gui.batch
        self.saves_dir = Path(saves_dir)
        self.prompt = prompt
        self.worlds: list[WorldInfo] = []
        self.scroll = 0
        self.velocity = 0.0
        self.selected_world = -1
        self.clicked_play = False
        self.clicked_new_world = False
        self.clicked_delete_world = False
        self.confirmed_world_options = False
        self.canceled_world_options = False
        self.confirmed_deletion = False
        self.canceled_deletion = False
        self.world_gen_type = WorldGenType.SUPER_FLAT
        self.menu_state = MenuState.SELECT_WORLD
        self.scan_worlds()

    def scan_worlds(self) -> None:
        self.worlds = scan_worlds(self.saves_dir)
        if self.selected_world >= len(self.worlds):
            self.selected_world = -1

    def _render_background(self) -> None:
        batch = self.batch
        batch.bind_gui_texture(GuiTexture.MENU_BACKGROUND)
        for i in range(160 // 32 + 1):
            for j in range(120 // 32 + 1):
                overlay = j >= 2 and self.menu_state is MenuState.SELECT_WORLD
                batch.push_quad_color(
                    i * 32, j * 32, -4 if overlay else -10, 32, 32, 0, 0, 32, 32,
                    INT16_MAX if overlay else _DIM_COLOR,
                )

    def _render_world_list(self) -> None:
        gui, batch = self.gui, self.batch
        _, movement_y = gui.cursor_movement()
        if gui.is_cursor_inside(0, 0, 160, 2 * 32):
            self.velocity = clamp(self.velocity + movement_y / 2.0, -MAX_VELOCITY, MAX_VELOCITY)
        self.scroll = int(self.scroll + self.velocity)
        self.velocity *= 0.75
        if abs(self.velocity) < 0.001:
            self.velocity = 0.0

        maximum = CHAR_HEIGHT * 2 * len(self.worlds)
        self.scroll = clamp(self.scroll, -maximum, 0)

        for i, info in enumerate(self.worlds):
            y = i * (CHAR_HEIGHT + CHAR_HEIGHT) + 10 + self.scroll
            if self.selected_world == i:
                batch.push_single_color_quad(10, y - 3, -7, 140, 1, _FRAME_COLOR)
                batch.push_single_color_quad(10, y + CHAR_HEIGHT + 2, -7, 140, 1, _FRAME_COLOR)
                batch.push_single_color_quad(10, y - 3, -7, 1, CHAR_HEIGHT + 6, _FRAME_COLOR)
                batch.push_single_color_quad(10 + 140, y - 3, -7, 1, CHAR_HEIGHT + 6, _FRAME_COLOR)
            if gui.entered_cursor_inside(10, y - 3, 140, CHAR_HEIGHT + 6) and y < 32 * 2:
                self.selected_world = i
            batch.push_text(20, y, -6, INT16_MAX, True, NO_WRAP, info.name)

        gui.offset(0, 2 * 32 + 5 + BUTTON_TEXT_PADDING)
        gui.begin_row_center(gui.relative_width(0.95), 1)
        self.clicked_play = gui.button(1.0, "Play selected world")
        gui.end_row()
        gui.begin_row_center(gui.relative_width(0.95), 2)
        self.clicked_new_world = gui.button(0.5, "New World")
        self.clicked_delete_world = gui.button(0.5, "Delete World")
        gui.end_row()

    def _render_confirm_deletion(self) -> None:
        gui = self.gui
        gui.offset(0, 10)
        gui.begin_row(self.batch.width, 1)
        gui.label(0.0, True, INT16_MAX, True, "Are you sure?")
        gui.end_row()
        gui.vertical_space(gui.relative_height(0.4))
        gui.begin_row_center(gui.relative_width(0.8), 3)
        self.canceled_deletion = gui.button(0.4, "No")
        gui.space(0.2)
        self.confirmed_deletion = gui.button(0.4, "Yes")
        gui.end_row()

    def _render_world_options(self) -> None:
        gui = self.gui
        gui.offset(0, 10)
        gui.begin_row_center(gui.relative_width(0.9), 3)
        gui.label(0.45, True, INT16_MAX, False, "World type:")
        gui.space(0.1)
        if gui.button(0.45, WORLD_GEN_TYPE_NAMES[self.world_gen_type]):
            self.world_gen_type = WorldGenType((self.world_gen_type + 1) % len(WorldGenType))
        gui.end_row()

        gui.vertical_space(gui.relative_height(0.4))

        gui.begin_row_center(gui.relative_width(0.9), 3)
        self.canceled_world_options = gui.button(0.45, "Cancel")
        gui.space(0.1)
        self.confirmed_world_options = gui.button(0.45, "Continue")

    def render(self) -> None:
        """Draw the current menu page and record which buttons were clicked."""
        self.batch.scale = 2
        self._render_background()
        if self.menu_state is MenuState.SELECT_WORLD:
            self._render_world_list()
        elif self.menu_state is MenuState.CONFIRM_DELETION:
            self._render_confirm_deletion()
        else:
            self._render_world_options()

    def _create_world(self) -> WorldSelectResult | None:
        gen_type = self.world_gen_type
        name = self.prompt("Enter the world name") if self.prompt is not None else None
        self.menu_state = MenuState.SELECT_WORLD
        if name is None or not name.strip():
            return None
        name = name[: WORLD_NAME_SIZE - 1]
        path = unique_world_path(sanitize_world_path(name), (w.path for w in self.worlds))
        return WorldSelectResult(path=path, name=name, gen_type=gen_type, new_world=True)

    def update(self) -> WorldSelectResult | None:
        """Act on the clicks of the last render; returns a world to play, if any."""
        if self.clicked_new_world:
            self.clicked_new_world = False
            self.menu_state = MenuState.WORLD_OPTIONS
        if self.confirmed_world_options:
            self.confirmed_world_options = False
            result = self._create_world()
            if result is not None:
                return result
        if self.clicked_play and self.selected_world != -1:
            self.clicked_play = False
            info = self.worlds[self.selected_world]
            self.menu_state = MenuState.SELECT_WORLD
            return WorldSelectResult(path=info.path, name=info.name, gen_type=None, new_world=False)
        if self.clicked_delete_world and self.selected_world != -1:
            self.clicked_delete_world = False
            self.menu_state = MenuState.CONFIRM_DELETION
        if self.confirmed_deletion:
            self.confirmed_deletion = False
            if self.selected_world != -1:
                delete_folder(self.saves_dir / self.worlds[self.selected_world].path)
            self.scan_worlds()
            self.menu_state = MenuState.SELECT_WORLD
        if self.canceled_deletion:
            self.canceled_deletion = False
            self.menu_state = MenuState.SELECT_WORLD
        if self.canceled_world_options:
            self.canceled_world_options = False
            self.menu_state = MenuState.SELECT_WORLD
        return None