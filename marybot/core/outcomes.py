from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from marybot.db.database import StoreUnavailable


class ErrorKind(str, Enum):
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    RECIPIENT_NOT_PLAYING = "RECIPIENT_NOT_PLAYING"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INSUFFICIENT_QUANTITY = "INSUFFICIENT_QUANTITY"
    EMPTY_INVENTORY = "EMPTY_INVENTORY"
    ITEM_NOT_IN_INVENTORY = "ITEM_NOT_IN_INVENTORY"
    ITEM_NOT_USABLE = "ITEM_NOT_USABLE"
    ALREADY_MARRIED = "ALREADY_MARRIED"
    TARGET_ALREADY_MARRIED = "TARGET_ALREADY_MARRIED"
    NOT_MARRIED = "NOT_MARRIED"
    NOT_MARRIED_TO_THAT_USER = "NOT_MARRIED_TO_THAT_USER"
    COOLDOWN_ACTIVE = "COOLDOWN_ACTIVE"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_TARGET = "INVALID_TARGET"
    NOT_ENOUGH_COINS = "NOT_ENOUGH_COINS"
    DAILY_ALREADY_CLAIMED = "DAILY_ALREADY_CLAIMED"
    TOO_SOON = "TOO_SOON"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]

    @property
    def transient(self) -> bool:
        return self in (ErrorKind.STORE_UNAVAILABLE, ErrorKind.CONCURRENT_MODIFICATION)


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.PLAYER_NOT_FOUND: "You are not playing the game yet!",
    ErrorKind.RECIPIENT_NOT_PLAYING: "That user is not currently playing the game!",
    ErrorKind.ITEM_NOT_FOUND: "That item doesn't exist!",
    ErrorKind.INSUFFICIENT_FUNDS: "You don't have enough money to buy this item!",
    ErrorKind.INSUFFICIENT_QUANTITY: "You don't have enough of that item!",
    ErrorKind.EMPTY_INVENTORY: "You do not have any items in your inventory!",
    ErrorKind.ITEM_NOT_IN_INVENTORY: "You do not have that item in your inventory!",
    ErrorKind.ITEM_NOT_USABLE: "That item works on its own, just keep it in your inventory!",
    ErrorKind.ALREADY_MARRIED: "You are already married!",
    ErrorKind.TARGET_ALREADY_MARRIED: "That user is already married!",
    ErrorKind.NOT_MARRIED: "You are not married!",
    ErrorKind.NOT_MARRIED_TO_THAT_USER: "You are not married to that user!",
    ErrorKind.COOLDOWN_ACTIVE: "You must wait a minute between uses!",
    ErrorKind.INVALID_AMOUNT: "Please specify a valid amount!",
    ErrorKind.INVALID_TARGET: "You can't do that to yourself!",
    ErrorKind.NOT_ENOUGH_COINS: "You don't have enough coins!",
    ErrorKind.DAILY_ALREADY_CLAIMED: "You already claimed your daily coins! Come back tomorrow!",
    ErrorKind.TOO_SOON: "Slow down! You need to wait before doing that again!",
    ErrorKind.STORE_UNAVAILABLE: "The database is not responding right now. Please try again later!",
    ErrorKind.CONCURRENT_MODIFICATION: "Your records changed while this was going through. Please try again!",
}


@dataclass(frozen=True)
class ListingEntry:
    label: str
    detail: str


@dataclass(frozen=True)
class Listing:
    title: str
    entries: tuple[ListingEntry, ...]
    page: int = 0
    total_pages: int = 1
    inline: bool = False

    @property
    def footer(self) -> str:
        return f"Page {self.page + 1} of {self.total_pages}"


@dataclass(frozen=True)
class Outcome:
    ok: bool
    message: str = ""
    error: ErrorKind | None = None
    listing: Listing | None = field(default=None)


def success(message: str = "", listing: Listing | None = None) -> Outcome:
    return Outcome(ok=True, message=message, listing=listing)


def failure(kind: ErrorKind) -> Outcome:
    return Outcome(ok=False, message=kind.message, error=kind)


def store_guarded(func: Callable[..., Outcome]) -> Callable[..., Outcome]:
    """Turn a StoreUnavailable raised mid-operation into a failed Outcome."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Outcome:
        try:
            return func(*args, **kwargs)
        except StoreUnavailable as exc:
            print(f"[store] {func.__name__} failed: {exc}")
            return failure(ErrorKind.STORE_UNAVAILABLE)

    return wrapper
