import math

import pytest

from craftus.block import Block
from craftus.commandline import CommandLine
from craftus.inputdata import InputData, KeyBits
from craftus.player import Player
from craftus.playercontroller import (
    DEFAULT_SCHEME,
    KEY_NAMES,
    N3DS_DEFAULT_SCHEME,
    ControlScheme,
    Key,
    PlayerController,
    convert_input,
    load_options,
    write_options,
)


class EmptyWorld:
    def __init__(self):
        self.changes = []

    def get_block(self, x, y, z):
        return Block.AIR

    def set_block(self, x, y, z, block):
        self.changes.append((x, y, z, block))

    def set_block_and_meta(self, x, y, z, block, metadata):
        self.changes.append((x, y, z, block, metadata))


@pytest.fixture
def controller():
    return PlayerController(Player(EmptyWorld()))


def test_convert_held_button():
    inp = convert_input(InputData(keysheld=KeyBits.A))
    assert inp.is_down(Key.A) == 1.0
    assert inp.was_pressed(Key.A) is False
    assert inp.is_down(Key.B) == 0.0


def test_convert_pressed_and_released_edges():
    inp = convert_input(InputData(keysdown=KeyBits.X, keysup=KeyBits.Y))
    assert inp.is_down(Key.X) == 1.0
    assert inp.was_pressed(Key.X) is True
    assert inp.was_released(Key.Y) is True
    assert inp.is_down(Key.Y) == 0.0


def test_convert_circle_pad_scaled_by_range():
    inp = convert_input(InputData(keysheld=KeyBits.CPAD_RIGHT, circle_pad_x=0x9C))
    assert inp.is_down(Key.CPAD_RIGHT) == pytest.approx(1.0)
    half = convert_input(InputData(keysheld=KeyBits.CPAD_LEFT, circle_pad_x=-0x4E))
    assert half.is_down(Key.CPAD_LEFT) == pytest.approx(0.5)


def test_convert_undefined_key_is_never_down():
    inp = convert_input(InputData(keysheld=0xFFFFFFFF, keysdown=0xFFFFFFFF))
    assert inp.is_down(Key.UNDEFINED) == 0.0
    assert inp.was_pressed(Key.UNDEFINED) is False


def test_write_options_layout(tmp_path):
    path = tmp_path / "options.ini"
    write_options(path, DEFAULT_SCHEME, True)
    lines = path.read_text().splitlines()
    assert lines[0] == "[controls]"
    assert "forward=X" in lines
    assert "strafeLeft=Y" in lines
    assert "autojump=1" in lines
    assert lines[-1] == "autojump=1"


def test_options_round_trip(tmp_path):
    path = tmp_path / "options.ini"
    scheme = ControlScheme(forward=Key.CPAD_UP, jump=Key.ZL, crouch=Key.ZR)
    write_options(path, scheme, False)
    loaded, auto_jump, complete = load_options(path, DEFAULT_SCHEME, True)
    assert loaded == scheme
    # The written auto-jump entry uses a different name than the one read.
    assert complete is False
    assert auto_jump is True


def test_load_options_reads_auto_jump(tmp_path):
    path = tmp_path / "options.ini"
    write_options(path, DEFAULT_SCHEME, True)
    path.write_text(path.read_text() + "auto_jumping=0\n")
    scheme, auto_jump, complete = load_options(path, N3DS_DEFAULT_SCHEME, True)
    assert scheme == DEFAULT_SCHEME
    assert auto_jump is False
    assert complete is True


def test_load_options_missing_file(tmp_path):
    scheme, auto_jump, complete = load_options(tmp_path / "none.ini", N3DS_DEFAULT_SCHEME, False)
    assert scheme == N3DS_DEFAULT_SCHEME
    assert auto_jump is False
    assert complete is False


def test_load_options_unknown_name_keeps_binding(tmp_path):
    path = tmp_path / "options.ini"
    path.write_text("[controls]\nforward=Nope\njump=B\n")
    scheme, _, complete = load_options(path, DEFAULT_SCHEME, True)
    assert scheme.forward == DEFAULT_SCHEME.forward
    assert scheme.jump == Key.B
    assert complete is False


def test_key_names_match_keys(tmp_path):
    assert len(KEY_NAMES) == len(Key)
    path = tmp_path / "options.ini"
    write_options(path, DEFAULT_SCHEME, True)
    text = path.read_text()
    assert all(name in text for name in KEY_NAMES)
    path.write_text("[controls]\nforward=CStickRight\n")
    scheme, _, _ = load_options(path, DEFAULT_SCHEME, True)
    assert scheme.forward == Key.CSTICK_RIGHT


def test_new_3ds_defaults_and_options_file(tmp_path):
    path = tmp_path / "sub" / "options.ini"
    player = Player(EmptyWorld())
    ctrl = PlayerController(player, new_3ds=True, options_path=path)
    assert ctrl.control_scheme == N3DS_DEFAULT_SCHEME
    assert player.auto_jump_enabled is False
    assert path.exists()
    assert "autojump=0" in path.read_text().splitlines()


def test_look_left_turns_yaw(controller):
    controller.update(InputData(keysheld=KeyBits.CPAD_LEFT, circle_pad_x=-0x9C), 0.1)
    assert controller.player.yaw == pytest.approx(math.radians(160) * 0.1, rel=1e-6)


def test_pitch_is_clamped(controller):
    controller.update(InputData(keysheld=KeyBits.CPAD_UP, circle_pad_y=0x9C), 5.0)
    assert controller.player.pitch == pytest.approx(math.radians(89.9))
    assert controller.player.view.y > 0.99


def test_switch_block_slots_wrap(controller):
    controller.update(InputData(keysdown=KeyBits.DLEFT), 0.0)
    assert controller.player.quick_select_bar_slot == controller.player.quick_select_bar_slots - 1
    controller.update(InputData(keysdown=KeyBits.DRIGHT), 0.0)
    assert controller.player.quick_select_bar_slot == 0
    controller.update(InputData(keysdown=KeyBits.DRIGHT), 0.0)
    assert controller.player.quick_select_bar_slot == 1


def test_crouch_toggles_on_release(controller):
    controller.update(InputData(keysup=KeyBits.DDOWN), 0.0)
    assert controller.player.crouching is True
    controller.update(InputData(keysup=KeyBits.DDOWN), 0.0)
    assert controller.player.crouching is False


def test_double_jump_toggles_flying(controller):
    controller.update(InputData(keysup=KeyBits.DUP), 0.0)
    assert controller.fly_timer == 0.0
    controller.update(InputData(keysheld=KeyBits.DUP), 0.01)
    assert controller.player.flying is True


def test_fly_window_expires(controller):
    controller.update(InputData(keysup=KeyBits.DUP), 0.0)
    controller.update(InputData(), 0.3)
    assert controller.fly_timer == -1.0
    controller.update(InputData(keysheld=KeyBits.DUP), 0.01)
    assert controller.player.flying is False


def test_walking_forward_moves_along_view(controller):
    controller.update(InputData(keysheld=KeyBits.X), 0.1)
    player = controller.player
    assert player.position.z < 0.0
    assert player.position.x == pytest.approx(0.0, abs=1e-9)
    assert player.bobbing > 0.0


def test_open_command_line_runs_command():
    player = Player(EmptyWorld())
    prompts = []

    def prompt(hint):
        prompts.append(hint)
        return "/tp 1 2 3"

    ctrl = PlayerController(player, command_line=CommandLine(), prompt=prompt)
    ctrl.update(InputData(keysdown=KeyBits.SELECT), 0.0)
    assert prompts == ["Enter command"]
    assert ctrl.opened_cmd is True
    assert (player.position.x, player.position.y, player.position.z) == (1.0, 2.0, 3.0)
    ctrl.update(InputData(), 1.0)
    assert ctrl.opened_cmd is False
    assert player.position.y == 2.0