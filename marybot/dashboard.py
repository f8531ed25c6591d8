from __future__ import annotations

from pathlib import Path

from flask import Flask, abort, jsonify, render_template_string

from marybot.config.runtime import get_all_app_configs
from marybot.core.catalog import emblem_for
from marybot.core.marriage import resolve_marriage
from marybot.core.player import PlayerRecord
from marybot.db import StoreUnavailable, get_guilds, get_player, get_players

TEMPLATE_DIR = Path(__file__).resolve().parent / "dashboard_templates"


def _load_template(name: str) -> str:
    return (TEMPLATE_DIR / name).read_text(encoding="utf-8")


INDEX_HTML = _load_template("index.html")
GUILD_HTML = _load_template("guild.html")


def _player_row(guild_id: int, player: PlayerRecord, partners: dict[int, PlayerRecord]) -> dict:
    partner = partners.get(player.married_to)
    if partner is None and player.married_to:
        partner = get_player(guild_id, player.married_to)
    state = resolve_marriage(player, partner)
    return {
        "user_id": str(player.user_id),
        "display_name": player.display_name or str(player.user_id),
        "balance": player.balance,
        "inventory": [
            {
                "name": stack.name,
                "emblem": emblem_for(stack.name),
                "quantity": stack.quantity,
            }
            for stack in player.inventory
        ],
        "marriage": state.status.value,
        "partner_id": str(state.partner_id) if state.partner_id else "",
        "partner_name": partner.display_name if partner is not None else "",
        "last_use_at": player.last_use_at.isoformat() if player.last_use_at else "",
        "joined_at": player.joined_at,
    }


def guild_players(guild_id: int) -> list[dict]:
    players = get_players(guild_id)
    by_id = {player.user_id: player for player in players}
    return [_player_row(guild_id, player, by_id) for player in players]


def create_app() -> Flask:
    """Read-only view of the player table. Nothing here writes to the store."""
    app = Flask(__name__)

    @app.errorhandler(StoreUnavailable)
    def store_unavailable(exc: StoreUnavailable):
        print(f"[dashboard] store unavailable: {exc}")
        return jsonify({"error": "Database unavailable"}), 503

    @app.get("/")
    def index():
        return render_template_string(
            INDEX_HTML,
            guilds=get_guilds(),
            configs=get_all_app_configs(),
        )

    @app.get("/guild/<int:guild_id>")
    def guild(guild_id: int):
        rows = guild_players(guild_id)
        if not rows:
            abort(404)
        return render_template_string(
            GUILD_HTML,
            guild_id=guild_id,
            guild_name=next(
                (g["guild_name"] for g in get_guilds() if g["guild_id"] == guild_id),
                str(guild_id),
            ),
            players=rows,
        )

    @app.get("/api/guild/<int:guild_id>/players")
    def api_guild_players(guild_id: int):
        return jsonify({"guild_id": str(guild_id), "players": guild_players(guild_id)})

    return app
