from __future__ import annotations

import logging

import pytest

from minetool.core.items import enchanted_nbt, make_item
from minetool.core.nbt import enchantments_of, simplify
from minetool.core.types import Enchantment


def test_simplify_unwraps_tagged_values() -> None:
    tag = {
        "type": "compound",
        "name": "",
        "value": {
            "Damage": {"type": "int", "value": 7},
            "Lore": {"type": "list", "value": {"type": "string", "value": ["a", "b"]}},
        },
    }
    assert simplify(tag) == {"Damage": 7, "Lore": ["a", "b"]}


def test_modern_enchantments() -> None:
    item = make_item("diamond_pickaxe", nbt=enchanted_nbt(efficiency=4, unbreaking=3))
    assert enchantments_of(item) == (
        Enchantment("efficiency", 4),
        Enchantment("unbreaking", 3),
    )


def test_legacy_numeric_enchantments() -> None:
    nbt = {
        "type": "compound",
        "name": "",
        "value": {
            "ench": {
                "type": "list",
                "value": {
                    "type": "compound",
                    "value": [
                        {
                            "id": {"type": "short", "value": 32},
                            "lvl": {"type": "short", "value": 3},
                        },
                        {
                            "id": {"type": "short", "value": 999},
                            "lvl": {"type": "short", "value": 1},
                        },
                    ],
                },
            }
        },
    }
    assert enchantments_of(make_item("iron_pickaxe", nbt=nbt)) == (Enchantment("efficiency", 3),)


def test_already_plain_nbt() -> None:
    nbt = {"Enchantments": [{"id": "minecraft:efficiency", "lvl": 2}]}
    assert enchantments_of(make_item("iron_pickaxe", nbt=nbt)) == (Enchantment("efficiency", 2),)


def test_missing_nbt_means_no_enchantments() -> None:
    assert enchantments_of(None) == ()
    assert enchantments_of(make_item("iron_pickaxe")) == ()
    assert enchantments_of(make_item("iron_pickaxe", nbt={"type": "compound", "value": {}})) == ()


@pytest.mark.parametrize(
    "nbt",
    [
        {"Enchantments": 5},
        {"Enchantments": ["efficiency"]},
        {"Enchantments": [{"id": "minecraft:efficiency", "lvl": "high"}]},
        {"type": "compound", "value": None},
    ],
)
def test_malformed_nbt_never_raises(nbt, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="minetool")
    assert enchantments_of(make_item("iron_pickaxe", nbt=nbt)) == ()
