import pytest
from PIL import Image

from craftus.fontloader import GLYPH_COUNT, load_font, measure_glyph_widths, to_rgba5551

SIZE = 128
WHITE = 0xFFFFFFFF


def blank():
    return [0] * (SIZE * SIZE)


def test_white_pixel_converts_to_all_ones():
    assert to_rgba5551(WHITE) == 0xFFFF


def test_alpha_bit_follows_high_alpha():
    assert to_rgba5551(0xFF000000) & 1 == 1
    assert to_rgba5551(0x7F000000) & 1 == 0
    assert to_rgba5551(0x7FFFFFFF) == to_rgba5551(WHITE) - 1


def test_conversion_fits_sixteen_bits():
    for pixel in (0x12345678, 0xDEADBEEF, WHITE, 0x80808080):
        assert 0 <= to_rgba5551(pixel) <= 0xFFFF


def test_empty_sheet_gives_minimum_widths():
    widths = measure_glyph_widths(blank())
    assert len(widths) == GLYPH_COUNT
    assert set(widths) == {3}


def test_full_sheet_gives_maximum_widths():
    widths = measure_glyph_widths([WHITE] * (SIZE * SIZE))
    assert set(widths) == {8}


def test_only_touched_glyph_widens():
    pixels = blank()
    pixels[2] = WHITE
    pixels[SIZE + 3] = WHITE
    widths = measure_glyph_widths(pixels)
    empty = measure_glyph_widths(blank())
    assert widths[0] > empty[0]
    assert widths[1:] == empty[1:]


def test_gap_stops_the_scan():
    pixels = blank()
    pixels[5] = WHITE
    assert measure_glyph_widths(pixels) == measure_glyph_widths(blank())


def test_widths_are_bounded():
    pixels = [(i * 7919) % 3 for i in range(SIZE * SIZE)]
    assert all(3 <= w <= 8 for w in measure_glyph_widths(pixels))


def test_small_sheet_is_rejected():
    with pytest.raises(ValueError):
        measure_glyph_widths([0] * 100)


def test_load_font_from_png(tmp_path):
    image = Image.new("RGBA", (SIZE, SIZE), (0, 0, 0, 0))
    for x in range(2, 5):
        image.putpixel((8 + x, 0), (255, 255, 255, 255))
    path = tmp_path / "ascii.png"
    image.save(path)

    font = load_font(path)
    assert (font.width, font.height) == (SIZE, SIZE)
    assert len(font.texture) == SIZE * SIZE
    assert font.texture[8 + 2] == to_rgba5551(WHITE)
    assert font.widths[1] > font.widths[0]
    assert font.widths[2:] == measure_glyph_widths(blank())[2:]


def test_load_font_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_font(tmp_path / "missing.png")


def test_load_font_wrong_size(tmp_path):
    path = tmp_path / "small.png"
    Image.new("RGBA", (64, 64)).save(path)
    with pytest.raises(ValueError):
        load_font(path)