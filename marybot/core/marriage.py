from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from marybot.core.player import PlayerRecord


class MarriageStatus(str, Enum):
    UNMARRIED = "UNMARRIED"
    PROPOSED = "PROPOSED"
    MARRIED = "MARRIED"


@dataclass(frozen=True)
class MarriageState:
    status: MarriageStatus
    partner_id: int = 0

    @property
    def is_married(self) -> bool:
        return self.status is MarriageStatus.MARRIED


UNMARRIED = MarriageState(MarriageStatus.UNMARRIED)


def resolve_marriage(player: PlayerRecord, partner: PlayerRecord | None) -> MarriageState:
    """
    Derive the tagged state from both records. Storage keeps one `married_to`
    column per player; only a mutual reference counts as married.
    """
    target = int(player.married_to or 0)
    if target == 0:
        return UNMARRIED
    if partner is not None and partner.user_id == target and partner.married_to == player.user_id:
        return MarriageState(MarriageStatus.MARRIED, target)
    return MarriageState(MarriageStatus.PROPOSED, target)
