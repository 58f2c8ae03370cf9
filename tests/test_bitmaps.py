import pytest

from honkpet.bitmaps import BITMAPS, Bitmap, bitmap, find_bitmaps
from honkpet.canvas import Canvas, Color


def test_table_has_all_sprites_in_order():
    looked_up = [bitmap(i) for i in range(36)]
    assert [b.index for b in looked_up] == list(range(36))
    assert [b.name for b in looked_up] == [b.name for b in BITMAPS]
    assert len(BITMAPS) == 36


def test_known_entries():
    big = bitmap(1)
    assert (big.name, big.width, big.height) == ("pet_gooseStillBig", 16, 26)
    table = bitmap(6)
    assert (table.display_name, table.width, table.height) == ("big table", 46, 38)
    assert bitmap(35).display_name == "grass 2"
    assert bitmap(25).name == "item_gravestone"


def test_bitmap_index_out_of_range():
    with pytest.raises(IndexError):
        bitmap(len(BITMAPS))
    with pytest.raises(IndexError):
        bitmap(-1)


def test_find_bitmaps_goose():
    geese = find_bitmaps("goose")
    assert [b.index for b in geese] == [0, 1, 2, 17, 21, 22, 23, 24, 26, 27, 28, 29]
    assert all(b.display_name == "goose" for b in geese)


def test_find_bitmaps_unknown_is_empty():
    assert find_bitmaps("dragon") == []


def test_fence_rows_follow_bytes():
    fence = find_bitmaps("fence")[0]
    lines = fence.to_text().split("\n")
    assert lines[0] == ".##..##..##..##."
    assert lines[1] == "#" * 16
    assert len(lines) == fence.height


def test_gravestone_bottom_row_full():
    stone = bitmap(25)
    rows = list(stone.rows())
    assert all(rows[-1])
    assert len(rows) == stone.height
    assert all(len(row) == stone.width for row in rows)


def test_pixel_outside_raises():
    sprite = bitmap(16)
    with pytest.raises(IndexError):
        sprite.pixel(sprite.width, 0)
    with pytest.raises(IndexError):
        sprite.pixel(0, sprite.height)


def test_missing_trailing_data_reads_blank():
    still = bitmap(0)
    assert still.pixel(0, still.height - 1) is True
    assert still.pixel(still.width - 1, still.height - 1) is False


def test_custom_bitmap_pixels():
    sprite = Bitmap(0, "test", "test", 9, 2, b"\x80\x80\x01\x00")
    assert sprite.pixel(0, 0) is True
    assert sprite.pixel(8, 0) is True
    assert sprite.pixel(7, 1) is True
    assert sprite.pixel(1, 0) is False


@pytest.mark.parametrize("index", range(36))
def test_draw_matches_pixels(index):
    sprite = bitmap(index)
    canvas = Canvas(sprite.width + 4, sprite.height + 4)
    sprite.draw(canvas, 2, 2, Color.WHITE)
    for y, row in enumerate(sprite.rows()):
        for x, bit in enumerate(row):
            assert (canvas.get_pixel(x + 2, y + 2) is Color.WHITE) == bit
    assert canvas.lit_count() == sum(sum(row) for row in sprite.rows())


def test_text_matches_canvas_text():
    sprite = bitmap(16)
    canvas = Canvas(sprite.width, sprite.height)
    sprite.draw(canvas, 0, 0, Color.WHITE)
    assert canvas.to_text("@", " ") == sprite.to_text("@", " ")