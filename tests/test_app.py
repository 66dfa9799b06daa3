import os

import pygame
import pytest

from solong.app import (
    SPRITE_NAMES,
    Action,
    SpriteSet,
    key_action,
    load_sprites,
    main,
    steps_text,
)
from solong.game import Direction
from solong.xpm import XpmError, read_xpm_file


def _xpm(width, height, color):
    rows = "\n".join(f'"{"a" * width}",' for _ in range(height))
    return (
        "static char *img[] = {\n"
        f'"{width} {height} 1 1",\n'
        f'"a c {color}",\n'
        f"{rows}\n"
        "};\n"
    )


def _write_assets(directory, size=(2, 3), color="#FF0000"):
    for name in SPRITE_NAMES:
        (directory / f"{name}.xpm").write_text(_xpm(size[0], size[1], color))


@pytest.mark.parametrize(
    "key, action",
    [
        (pygame.K_q, Action.QUIT),
        (pygame.K_ESCAPE, Action.QUIT),
        (pygame.K_d, Action.RIGHT),
        (pygame.K_RIGHT, Action.RIGHT),
        (pygame.K_a, Action.LEFT),
        (pygame.K_LEFT, Action.LEFT),
        (pygame.K_s, Action.DOWN),
        (pygame.K_DOWN, Action.DOWN),
        (pygame.K_w, Action.UP),
        (pygame.K_UP, Action.UP),
    ],
)
def test_key_action_bindings(key, action):
    assert key_action(key) is action


def test_unbound_key_has_no_action():
    assert key_action(pygame.K_x) is None


def test_action_directions():
    assert key_action(pygame.K_d).direction is Direction.RIGHT
    assert key_action(pygame.K_a).direction is Direction.LEFT
    assert key_action(pygame.K_s).direction is Direction.DOWN
    assert key_action(pygame.K_w).direction is Direction.UP
    assert key_action(pygame.K_q).direction is None


def test_steps_text():
    assert steps_text(0) == "STEPS: 0"
    assert steps_text(42) == "STEPS: 42"


def test_load_sprites_reads_every_sprite(tmp_path):
    _write_assets(tmp_path)
    sprites = load_sprites(tmp_path)
    assert set(sprites.images) == set(SPRITE_NAMES)
    assert sprites["wall"].pixel(0, 0) == 0xFF0000
    assert sprites.tile_size == (2, 3)


def test_tile_size_is_largest_sprite(tmp_path):
    _write_assets(tmp_path)
    sprites = load_sprites(tmp_path)
    images = dict(sprites.images)
    (tmp_path / "big.xpm").write_text(_xpm(5, 4, "#00FF00"))
    images["exit"] = read_xpm_file(tmp_path / "big.xpm")
    assert SpriteSet(images).tile_size == (5, 4)


def test_load_sprites_missing_file(tmp_path):
    _write_assets(tmp_path)
    (tmp_path / "enemy_3.xpm").unlink()
    with pytest.raises(XpmError):
        load_sprites(tmp_path)


def test_main_without_map_argument(capsys):
    assert main([]) == 255
    out = capsys.readouterr().out
    assert "Please run with a map path in the terminal!" in out
    assert os.strerror(22) in out


def test_main_with_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 255
    assert "Please run with a map path in the terminal!" in capsys.readouterr().out


def test_main_rejects_wrong_extension(capsys, tmp_path):
    assert main([str(tmp_path / "map.txt")]) == 255
    assert "File type is not supported, use .ber files!" in capsys.readouterr().out


def test_main_reports_missing_file(capsys, tmp_path):
    assert main([str(tmp_path / "absent.ber")]) == 255
    assert "File doesn't exists" in capsys.readouterr().out


def test_main_reports_invalid_map(capsys, tmp_path):
    path = tmp_path / "bad.ber"
    path.write_text("1111\n1001\n1001\n1111\n")
    assert main([str(path)]) == 255
    assert "Something is missing from the map!" in capsys.readouterr().out