from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from marybot.config.settings import (
    INVENTORY_PAGE_SIZE,
    LEADERBOARD_SIZE,
    SHOP_PAGE_SIZE,
    START_BALANCE,
)
from marybot.db.repositories import get_state_value, set_state_value


@dataclass(frozen=True)
class AppConfigSpec:
    default: Any
    cast: Callable[[str], Any]
    description: str


APP_CONFIG_SPECS: dict[str, AppConfigSpec] = {
    "START_BALANCE": AppConfigSpec(
        default=int(START_BALANCE),
        cast=int,
        description="Balance given to a player record when it is first created.",
    ),
    "SHOP_PAGE_SIZE": AppConfigSpec(
        default=int(SHOP_PAGE_SIZE),
        cast=int,
        description="Catalog items shown per /shop page.",
    ),
    "INVENTORY_PAGE_SIZE": AppConfigSpec(
        default=int(INVENTORY_PAGE_SIZE),
        cast=int,
        description="Item stacks shown per /inventory page.",
    ),
    "LEADERBOARD_SIZE": AppConfigSpec(
        default=int(LEADERBOARD_SIZE),
        cast=int,
        description="Number of players listed by /leaderboard.",
    ),
}


def _state_key(name: str) -> str:
    return f"config:{name}"


def _normalize(name: str, value: Any) -> Any:
    if name == "START_BALANCE":
        return max(0, int(value))
    if name in {"SHOP_PAGE_SIZE", "INVENTORY_PAGE_SIZE"}:
        # Discord embeds cap out at 25 fields.
        return max(1, min(25, int(value)))
    if name == "LEADERBOARD_SIZE":
        return max(1, min(50, int(value)))
    return value


def ensure_app_config_defaults() -> None:
    for name, spec in APP_CONFIG_SPECS.items():
        if get_state_value(_state_key(name)) is None:
            set_state_value(_state_key(name), str(_normalize(name, spec.default)))


def get_app_config(name: str) -> Any:
    spec = APP_CONFIG_SPECS.get(name)
    if spec is None:
        raise KeyError(f"Unknown app config: {name}")
    raw = get_state_value(_state_key(name))
    if raw is None:
        return _normalize(name, spec.default)
    try:
        parsed = spec.cast(str(raw))
    except (TypeError, ValueError):
        parsed = spec.default
    return _normalize(name, parsed)


def get_all_app_configs() -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for name, spec in APP_CONFIG_SPECS.items():
        rows.append(
            {
                "name": name,
                "value": get_app_config(name),
                "default": _normalize(name, spec.default),
                "type": spec.cast.__name__,
                "description": spec.description,
            }
        )
    return rows
