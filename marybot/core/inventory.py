from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class ItemStack:
    name: str
    quantity: int


Inventory = tuple[ItemStack, ...]


def held_quantity(inventory: Iterable[ItemStack], name: str) -> int:
    for stack in inventory:
        if stack.name == name:
            return stack.quantity
    return 0


def increment(inventory: Inventory, name: str, amount: int) -> Inventory:
    if amount <= 0:
        raise ValueError("Inventory increments must be positive.")
    out: list[ItemStack] = []
    merged = False
    for stack in inventory:
        if stack.name == name and not merged:
            out.append(ItemStack(name, stack.quantity + amount))
            merged = True
        else:
            out.append(stack)
    if not merged:
        out.append(ItemStack(name, amount))
    return tuple(out)


def decrement(inventory: Inventory, name: str, amount: int) -> tuple[Inventory, bool]:
    """
    Remove `amount` of `name`. Returns the inventory unchanged with ok=False
    when the stack is missing or too small; a stack reaching 0 is dropped.
    """
    if amount <= 0:
        raise ValueError("Inventory decrements must be positive.")
    index = next((i for i, stack in enumerate(inventory) if stack.name == name), -1)
    if index < 0 or inventory[index].quantity < amount:
        return inventory, False
    remaining = inventory[index].quantity - amount
    out = list(inventory[:index])
    if remaining > 0:
        out.append(ItemStack(name, remaining))
    out.extend(inventory[index + 1 :])
    return tuple(out), True


def to_rows(inventory: Iterable[ItemStack]) -> list[dict]:
    return [{"name": stack.name, "quantity": int(stack.quantity)} for stack in inventory]


def from_rows(rows: object) -> Inventory:
    if not isinstance(rows, list):
        return ()
    out: Inventory = ()
    for row in rows:
        if not isinstance(row, dict):
            continue
        name = str(row.get("name", "")).strip()
        try:
            quantity = int(row.get("quantity", 0))
        except (TypeError, ValueError):
            continue
        if not name or quantity <= 0:
            continue
        # Legacy rows may repeat a name; merge them into one stack.
        out = increment(out, name, quantity)
    return out
