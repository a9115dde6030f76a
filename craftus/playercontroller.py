"""Maps controller input onto player movement, looking and block actions."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from enum import IntEnum
from pathlib import Path
from typing import Callable

from craftus.commandline import CommandLine
from craftus.inputdata import InputData, KeyBits
from craftus.mathutil import DEG_TO_RAD, clamp
from craftus.player import Player
from craftus.vecmath import Float3

STICK_RANGE = 0x9C
WALK_SPEED = 4.3
LOOK_SPEED_DEG = 160.0
PITCH_LIMIT = DEG_TO_RAD * 89.9
FLY_TOGGLE_WINDOW = 0.25

AUTO_JUMP_READ_KEY = "auto_jumping"
AUTO_JUMP_WRITE_KEY = "autojump"


class Key(IntEnum):
    """Buttons and stick directions a control can be bound to."""

    UNDEFINED = 0
    A = 1
    B = 2
    X = 3
    Y = 4
    L = 5
    R = 6
    START = 7
    SELECT = 8
    DUP = 9
    DDOWN = 10
    DLEFT = 11
    DRIGHT = 12
    CPAD_UP = 13
    CPAD_DOWN = 14
    CPAD_LEFT = 15
    CPAD_RIGHT = 16
    CSTICK_UP = 17
    CSTICK_DOWN = 18
    CSTICK_LEFT = 19
    CSTICK_RIGHT = 20
    ZL = 21
    ZR = 22


KEY_NAMES = (
    "Not Set",
    "A",
    "B",
    "X",
    "Y",
    "L",
    "R",
    "Start",
    "Select",
    "DUp",
    "DDown",
    "DLeft",
    "DRight",
    "CircUp",
    "CircDown",
    "CircLeft",
    "CircRight",
    "CStickUp",
    "CStickDown",
    "CStickLeft",
    "CStickRight",
    "ZL",
    "ZR",
)

PLATFORM_BUTTONS = len(KEY_NAMES)


@dataclass(frozen=True)
class ControlScheme:
    forward: Key = Key.X
    backward: Key = Key.B
    strafe_left: Key = Key.Y
    strafe_right: Key = Key.A
    look_left: Key = Key.CPAD_LEFT
    look_right: Key = Key.CPAD_RIGHT
    look_up: Key = Key.CPAD_UP
    look_down: Key = Key.CPAD_DOWN
    place_block: Key = Key.L
    break_block: Key = Key.R
    jump: Key = Key.DUP
    switch_block_left: Key = Key.DLEFT
    switch_block_right: Key = Key.DRIGHT
    open_cmd: Key = Key.SELECT
    crouch: Key = Key.DDOWN


DEFAULT_SCHEME = ControlScheme()

N3DS_DEFAULT_SCHEME = ControlScheme(
    forward=Key.CPAD_UP,
    backward=Key.CPAD_DOWN,
    strafe_left=Key.CPAD_LEFT,
    strafe_right=Key.CPAD_RIGHT,
    look_left=Key.CSTICK_LEFT,
    look_right=Key.CSTICK_RIGHT,
    look_up=Key.CSTICK_UP,
    look_down=Key.CSTICK_DOWN,
    place_block=Key.L,
    break_block=Key.R,
    jump=Key.ZL,
    switch_block_left=Key.DLEFT,
    switch_block_right=Key.DRIGHT,
    open_cmd=Key.SELECT,
    crouch=Key.ZR,
)

# Scheme attribute and the name it has in the options file.
_SCHEME_FIELDS = (
    ("forward", "forward"),
    ("backward", "backward"),
    ("strafe_left", "strafeLeft"),
    ("strafe_right", "strafeRight"),
    ("look_left", "lookLeft"),
    ("look_right", "lookRight"),
    ("look_up", "lookUp"),
    ("look_down", "lookDown"),
    ("place_block", "placeBlock"),
    ("break_block", "breakBlock"),
    ("jump", "jump"),
    ("switch_block_left", "switchBlockLeft"),
    ("switch_block_right", "switchBlockRight"),
    ("open_cmd", "openCmd"),
    ("crouch", "crouch"),
)

_BUTTONS = (
    (Key.A, KeyBits.A),
    (Key.B, KeyBits.B),
    (Key.X, KeyBits.X),
    (Key.Y, KeyBits.Y),
    (Key.L, KeyBits.L),
    (Key.R, KeyBits.R),
    (Key.START, KeyBits.START),
    (Key.SELECT, KeyBits.SELECT),
    (Key.DUP, KeyBits.DUP),
    (Key.DDOWN, KeyBits.DDOWN),
    (Key.DLEFT, KeyBits.DLEFT),
    (Key.DRIGHT, KeyBits.DRIGHT),
    (Key.ZL, KeyBits.ZL),
    (Key.ZR, KeyBits.ZR),
)


@dataclass
class PlatformInput:
    """Per-key analog strength and press/release edges for one frame."""

    keys: list[float] = field(default_factory=lambda: [0.0] * PLATFORM_BUTTONS)
    keys_down: list[bool] = field(default_factory=lambda: [False] * PLATFORM_BUTTONS)
    keys_up: list[bool] = field(default_factory=lambda: [False] * PLATFORM_BUTTONS)

    def is_down(self, key: Key) -> float:
        return self.keys[key]

    def was_released(self, key: Key) -> bool:
        return self.keys_up[key]

    def was_pressed(self, key: Key) -> bool:
        return self.keys_down[key]


def convert_input(data: InputData) -> PlatformInput:
    """Translate raw key masks and stick positions into per-key values."""
    result = PlatformInput()

    def register(key: Key, bit: int, strength: float) -> None:
        active = bool(data.keysdown & bit) or bool(data.keysheld & bit)
        result.keys[key] = strength * float(active)
        result.keys_down[key] = bool(data.keysdown & bit)
        result.keys_up[key] = bool(data.keysup & bit)

    for key, bit in _BUTTONS:
        register(key, bit, 1.0)

    circ_x = abs(data.circle_pad_x / STICK_RANGE)
    circ_y = abs(data.circle_pad_y / STICK_RANGE)
    register(Key.CPAD_UP, KeyBits.CPAD_UP, circ_y)
    register(Key.CPAD_DOWN, KeyBits.CPAD_DOWN, circ_y)
    register(Key.CPAD_LEFT, KeyBits.CPAD_LEFT, circ_x)
    register(Key.CPAD_RIGHT, KeyBits.CPAD_RIGHT, circ_x)

    cstick_x = abs(data.c_stick_x / STICK_RANGE)
    cstick_y = abs(data.c_stick_y / STICK_RANGE)
    register(Key.CSTICK_UP, KeyBits.CSTICK_UP, cstick_y)
    register(Key.CSTICK_DOWN, KeyBits.CSTICK_DOWN, cstick_y)
    register(Key.CSTICK_LEFT, KeyBits.CSTICK_LEFT, cstick_x)
    register(Key.CSTICK_RIGHT, KeyBits.CSTICK_RIGHT, cstick_x)
    return result


def _read_ini(text: str) -> dict[str, dict[str, str]]:
    sections: dict[str, dict[str, str]] = {}
    current = sections.setdefault("", {})
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("[") and "]" in line:
            current = sections.setdefault(line[1 : line.index("]")].strip().lower(), {})
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        current[key.strip().lower()] = value
    return sections


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def load_options(
    path: str | Path, scheme: ControlScheme, auto_jump: bool
) -> tuple[ControlScheme, bool, bool]:
    """Read the control bindings from an options file.

    Returns the scheme, the auto-jump setting and whether every entry was
    present. Unknown key names leave a binding as it was.
    """
    path = Path(path)
    if not path.exists():
        return scheme, auto_jump, False

    controls = _read_ini(path.read_text()).get("controls", {})
    complete = True
    changes: dict[str, Key] = {}
    for attr, ini_name in _SCHEME_FIELDS:
        value = controls.get(ini_name.lower())
        if value is None:
            complete = False
            continue
        tokens = value.split()
        token = tokens[0] if tokens else ""
        if token in KEY_NAMES:
            changes[attr] = Key(KEY_NAMES.index(token))
    scheme = replace(scheme, **changes)

    value = controls.get(AUTO_JUMP_READ_KEY)
    if value is None:
        complete = False
    else:
        match = _INT_PREFIX.match(value)
        if match:
            auto_jump = bool(int(match.group(1)))
    return scheme, auto_jump, complete


def write_options(path: str | Path, scheme: ControlScheme, auto_jump: bool) -> None:
    """Write the control bindings, with a list of allowed key names."""
    parts = ["[controls]\n", "; The allowed key values are: \n; "]
    for count, name in enumerate(KEY_NAMES[:-1], 1):
        parts.append(f"{name}, ")
        if count % 5 == 0:
            parts.append("\n ; ")
    parts.append(f"{KEY_NAMES[-1]}\n\n")
    for attr, ini_name in _SCHEME_FIELDS:
        parts.append(f"{ini_name}={KEY_NAMES[getattr(scheme, attr)]}\n")
    parts.append(
        "; 0 = disabled, 1 = enabled default: 1 for O3ds, 0 for N3ds\n"
        f"{AUTO_JUMP_WRITE_KEY}={int(auto_jump)}\n"
    )
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(parts))


class PlayerController:
    """Drives a player from one frame of input at a time."""

    def __init__(
        self,
        player: Player,
        *,
        new_3ds: bool = False,
        options_path: str | Path | None = None,
        command_line: CommandLine | None = None,
        prompt: Callable[[str], str | None] | None = None,
    ) -> None:
        self.player = player
        self.break_place_timeout = 0.0
        self.opened_cmd = False
        self.fly_timer = -1.0
        self.command_line = command_line
        self.prompt = prompt

        if new_3ds:
            self.control_scheme = N3DS_DEFAULT_SCHEME
            player.auto_jump_enabled = False
        else:
            self.control_scheme = DEFAULT_SCHEME
            player.auto_jump_enabled = True

        if options_path is not None:
            scheme, auto_jump, complete = load_options(
                options_path, self.control_scheme, player.auto_jump_enabled
            )
            self.control_scheme = scheme
            player.auto_jump_enabled = auto_jump
            if not complete:
                write_options(options_path, scheme, auto_jump)

    def update(self, data: InputData, dt: float) -> None:
        player = self.player
        scheme = self.control_scheme
        inp = convert_input(data)

        jump = inp.is_down(scheme.jump)
        crouch = inp.is_down(scheme.crouch)
        forward = inp.is_down(scheme.forward)
        backward = inp.is_down(scheme.backward)
        strafe_left = inp.is_down(scheme.strafe_left)
        strafe_right = inp.is_down(scheme.strafe_right)

        forward_vec = Float3(-math.sin(player.yaw), 0.0, -math.cos(player.yaw))
        right_vec = forward_vec.cross(Float3(0.0, 1.0, 0.0))

        movement = (
            forward_vec.scale(forward)
            - forward_vec.scale(backward)
            + right_vec.scale(strafe_right)
            - right_vec.scale(strafe_left)
        )
        if player.flying:
            movement = movement + Float3(0.0, jump, 0.0) - Float3(0.0, crouch, 0.0)
        if movement.magnitude_sqr() > 0.0:
            speed = WALK_SPEED * Float3(
                strafe_right - strafe_left, jump - crouch, backward - forward
            ).magnitude()
            player.bobbing += speed * 1.5 * dt
            movement = movement.normalized().scale(speed)

        look_left = inp.is_down(scheme.look_left)
        look_right = inp.is_down(scheme.look_right)
        look_up = inp.is_down(scheme.look_up)
        look_down = inp.is_down(scheme.look_down)

        player.yaw += (look_left - look_right) * LOOK_SPEED_DEG * DEG_TO_RAD * dt
        player.pitch += (look_up - look_down) * LOOK_SPEED_DEG * DEG_TO_RAD * dt
        player.pitch = clamp(player.pitch, -PITCH_LIMIT, PITCH_LIMIT)

        if inp.is_down(scheme.place_block) > 0.0:
            player.place_block()
        if inp.is_down(scheme.break_block) > 0.0:
            player.break_block()

        if jump > 0.0:
            player.jump(movement)

        released_jump = inp.was_released(scheme.jump)
        if self.fly_timer >= 0.0:
            if jump > 0.0:
                player.flying = not player.flying
            self.fly_timer += dt
            if self.fly_timer > FLY_TOGGLE_WINDOW:
                self.fly_timer = -1.0
        elif released_jump:
            self.fly_timer = 0.0

        if not player.flying and inp.was_released(scheme.crouch):
            player.crouching = not player.crouching

        if inp.was_pressed(scheme.switch_block_left):
            player.quick_select_bar_slot -= 1
            if player.quick_select_bar_slot == -1:
                player.quick_select_bar_slot = player.quick_select_bar_slots - 1
        if inp.was_pressed(scheme.switch_block_right):
            player.quick_select_bar_slot += 1
            if player.quick_select_bar_slot == player.quick_select_bar_slots:
                player.quick_select_bar_slot = 0

        if self.opened_cmd:
            dt = 0.0
            self.opened_cmd = False

        if inp.was_pressed(scheme.open_cmd) and self.command_line is not None and self.prompt is not None:
            self.command_line.activate(player, self.prompt)
            self.opened_cmd = True

        player.move(dt, movement)
        player.update()