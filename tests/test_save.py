import pytest

from hacktivist.save import (
    FIELD_COUNT,
    SaveData,
    format_save,
    load_save,
    parse_save,
    write_save,
)
from hacktivist.state import Inventory, Item, Scene, Slot


def _sample():
    return SaveData(
        x=3900.5,
        y=2100.25,
        scene=Scene.FACTORY,
        dollars=650,
        xp=75,
        attack=125,
        health=150,
        speed=100,
        inventory=Inventory(slots=[Slot(Item.KATANA, 1), Slot(Item.SUGAR, 3),
                                   Slot(), Slot(Item.COMPUTER, 1)]),
        exit_house=1,
        first_factory=4,
        history=2,
        script_line=14,
        factory_open=True,
    )


def test_default_line_starts_with_position_scene_and_money():
    line = format_save(SaveData())
    assert line.startswith("0.000000;0.000000;0;350;")
    assert line.endswith("\n")


def test_line_has_all_fields():
    assert len(format_save(_sample()).split(";")) == FIELD_COUNT


def test_round_trip():
    data = _sample()
    assert parse_save(format_save(data)) == data


def test_default_round_trip():
    assert parse_save(format_save(SaveData())) == SaveData()


def test_parse_reads_inventory_slots():
    data = parse_save(format_save(_sample()))
    assert data.inventory.holds(Item.KATANA)
    assert data.inventory.slots[2].item == Item.NONE
    assert data.factory_open is True


def test_parse_too_few_fields():
    with pytest.raises(ValueError):
        parse_save("1.0;2.0;0;350")


def test_parse_unknown_item():
    fields = format_save(SaveData()).split(";")
    fields[8] = "9"
    with pytest.raises(ValueError):
        parse_save(";".join(fields))


def test_parse_ignores_trailing_garbage_in_numbers():
    fields = format_save(_sample()).split(";")
    fields[3] = "650xyz"
    assert parse_save(";".join(fields)).dollars == 650


def test_write_then_load(tmp_path):
    path = tmp_path / "save.txt"
    data = _sample()
    write_save(data, path)
    assert load_save(path) == data
    assert path.read_text() == format_save(data)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_save(tmp_path / "missing.txt")