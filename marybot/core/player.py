from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from marybot.core.inventory import Inventory, held_quantity


@dataclass(frozen=True)
class PlayerRecord:
    guild_id: int
    user_id: int
    balance: int = 0
    last_use_at: datetime | None = None
    married_to: int = 0
    inventory: Inventory = ()
    version: int = 0
    display_name: str = ""
    guild_name: str = ""
    joined_at: str = ""
    last_daily_at: datetime | None = None
    last_beg_at: datetime | None = None
    last_rob_at: datetime | None = None

    def held(self, name: str) -> int:
        return held_quantity(self.inventory, name)

    @property
    def mention(self) -> str:
        return f"<@{self.user_id}>"
