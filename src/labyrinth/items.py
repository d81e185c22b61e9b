# Canonical item/port vocabulary shared by builders and the validator.

from enum import Enum


class Item(Enum):
    NOTHING = 0
    SPELLBOOK = 1
    POTION = 2
    WAND = 3


# The three things you need to escape.
ESCAPE_ITEMS = frozenset({Item.SPELLBOOK, Item.POTION, Item.WAND})


class Port(Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    UNDEFINED = "?"  # no free port; never stored on a cell

    @property
    def title(self) -> str:
        return self.name.capitalize()


# Order in which free ports are offered to the twisty builder.
FREE_PORT_ORDER = (Port.EAST, Port.WEST, Port.NORTH, Port.SOUTH)

MOVES = {
    "N": Port.NORTH,
    "S": Port.SOUTH,
    "E": Port.EAST,
    "W": Port.WEST,
}

SYMBOLS = {
    Item.POTION: " ⚗",
    Item.SPELLBOOK: " 🕮",
    Item.WAND: " ⚚",
}


def symbol_for(item: Item) -> str:
    return SYMBOLS.get(item, "")
