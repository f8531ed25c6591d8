from marybot.db.database import StoreUnavailable, get_connection, init_db
from marybot.db.repositories import (
    credit_player,
    ensure_player_exists,
    get_guilds,
    get_player,
    get_players,
    get_state_value,
    modify_player,
    set_state_value,
    update_player,
)

__all__ = [
    "StoreUnavailable",
    "credit_player",
    "ensure_player_exists",
    "get_connection",
    "get_guilds",
    "get_player",
    "get_players",
    "get_state_value",
    "init_db",
    "modify_player",
    "set_state_value",
    "update_player",
]
