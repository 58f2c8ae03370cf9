import pytest

from honkpet.savegame import EepromStore, SaveGame


def _sample() -> SaveGame:
    return SaveGame(
        hunger=7,
        sleep=8,
        fun=9,
        money=200,
        pong_xp=3,
        pong_lvl=2,
        invent=list(range(8)),
        invent_items=5,
        placed=[i * 2 for i in range(30)],
        placed_items=4,
        placed_x=[100 - i for i in range(30)],
        placed_y=[i + 50 for i in range(30)],
        food_inv=[16, 18, 0, 0, 0, 0, 0, 0],
        food_inv_items=2,
        save_version=1,
    )


def test_size_is_sum_of_fields():
    assert SaveGame.SIZE == 116
    assert len(SaveGame().to_bytes()) == SaveGame.SIZE


def test_field_order_in_bytes():
    data = _sample().to_bytes()
    assert list(data[:6]) == [7, 8, 9, 200, 3, 2]
    assert list(data[6:14]) == list(range(8))
    assert data[14] == 5
    assert data[-1] == 1
    assert data[-2] == 2


def test_round_trip():
    save = _sample()
    assert SaveGame.from_bytes(save.to_bytes()) == save


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        SaveGame.from_bytes(b"\x00" * 10)


def test_value_out_of_range():
    with pytest.raises(ValueError):
        SaveGame(hunger=256)


def test_list_wrong_length():
    with pytest.raises(ValueError):
        SaveGame(invent=[1, 2, 3])


def test_store_round_trip(tmp_path):
    store = EepromStore(tmp_path / "eeprom.bin", 4096)
    save = _sample()
    store.write_save(0, save)
    assert store.read_save(0) == save


def test_store_fresh_reads_erased(tmp_path):
    store = EepromStore(tmp_path / "eeprom.bin", 4096)
    save = store.read_save(0)
    assert save.to_bytes() == b"\xff" * SaveGame.SIZE


def test_store_keeps_other_regions(tmp_path):
    store = EepromStore(tmp_path / "eeprom.bin", 4096)
    first = _sample()
    second = SaveGame(hunger=1, save_version=9)
    store.write_save(0, first)
    store.write_save(200, second)
    assert store.read_save(0) == first
    assert store.read_save(200) == second
    assert (tmp_path / "eeprom.bin").stat().st_size == 4096


def test_store_wraps_addresses(tmp_path):
    store = EepromStore(tmp_path / "eeprom.bin", 4096)
    save = _sample()
    store.write_save(4090, save)
    assert store.read_save(4090) == save
    assert store.read_save(4090 - 4096 + 4096) == save


def test_store_bad_address(tmp_path):
    store = EepromStore(tmp_path / "eeprom.bin", 4096)
    with pytest.raises(ValueError):
        store.read_save(-1)