from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

T = TypeVar("T")

_NON_ALNUM = re.compile(r"[^0-9a-z]+")

CHOCOLATE = "chocolate"
BOW = "bow"
RING = "ring"
GUN = "gun"
SHIELD = "shield"
CAR = "car"


def normalize_item_name(text: str | None) -> str:
    """Map a display name or user input to the bare identifier ("🔫 Gun" -> "gun")."""
    return _NON_ALNUM.sub("", str(text or "").casefold())


@dataclass(frozen=True)
class CatalogItem:
    name: str
    price: int
    description: str
    identifier: str = field(init=False)

    def __post_init__(self) -> None:
        if self.price <= 0:
            raise ValueError(f"Catalog price must be positive: {self.name}")
        object.__setattr__(self, "identifier", normalize_item_name(self.name))

    @property
    def emblem(self) -> str:
        head, _, _rest = self.name.partition(" ")
        return head

    @property
    def sell_price(self) -> int:
        return self.price // 2


_ITEMS = (
    CatalogItem("🔫 Gun", 2000, "It's a gun... what do you expect?"),
    CatalogItem("🚗 Car", 50000, "Run people over with this car!"),
    CatalogItem("🍫 Chocolate", 50, "It won't help against the zombies, but everyone loves chocolate!"),
    CatalogItem("💍 Ring", 1000, "Congratulations! Who's the lucky person?"),
    CatalogItem("🏹 Bow", 400, "It might not be as strong as a gun, but it's cheaper!"),
    CatalogItem("🛡️ Shield", 5000, "Protect yourself from the attackers!"),
)

CATALOG: tuple[CatalogItem, ...] = tuple(sorted(_ITEMS, key=lambda item: item.price))
_BY_IDENTIFIER = {item.identifier: item for item in CATALOG}


def list_items() -> tuple[CatalogItem, ...]:
    return CATALOG


def find_item(identifier: str | None) -> CatalogItem | None:
    return _BY_IDENTIFIER.get(normalize_item_name(identifier))


def emblem_for(identifier: str) -> str:
    item = find_item(identifier)
    return item.emblem if item is not None else ""


def page_slice(entries: Sequence[T], page_size: int, page: int) -> tuple[list[T], int, int]:
    """Return (chunk, clamped page, total pages); pages are zero-based."""
    size = max(1, int(page_size))
    total_pages = max(1, math.ceil(len(entries) / size))
    index = max(0, min(int(page), total_pages - 1))
    start = index * size
    return list(entries[start : start + size]), index, total_pages
