from __future__ import annotations

from marybot.config.runtime import get_app_config
from marybot.core.catalog import emblem_for, find_item, list_items, page_slice
from marybot.core.inventory import decrement, increment
from marybot.core.outcomes import (
    ErrorKind,
    Listing,
    ListingEntry,
    Outcome,
    failure,
    store_guarded,
    success,
)
from marybot.db import credit_player, get_player, get_players, update_player


@store_guarded
def buy_item(guild_id: int, user_id: int, item: str, amount: int) -> Outcome:
    if amount <= 0:
        return failure(ErrorKind.INVALID_AMOUNT)

    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)

    catalog_item = find_item(item)
    if catalog_item is None:
        return failure(ErrorKind.ITEM_NOT_FOUND)

    cost = catalog_item.price * amount
    if player.balance < cost:
        return failure(ErrorKind.INSUFFICIENT_FUNDS)

    applied = update_player(
        guild_id,
        user_id,
        expected_version=player.version,
        balance_delta=-cost,
        inventory=increment(player.inventory, catalog_item.identifier, amount),
    )
    if not applied:
        return failure(ErrorKind.CONCURRENT_MODIFICATION)
    return success(
        f"You have successfully bought {amount}X {catalog_item.identifier} for {cost} coins!"
    )


@store_guarded
def sell_item(guild_id: int, user_id: int, item: str, amount: int) -> Outcome:
    if amount <= 0:
        return failure(ErrorKind.INVALID_AMOUNT)

    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)
    if not player.inventory:
        return failure(ErrorKind.EMPTY_INVENTORY)

    catalog_item = find_item(item)
    if catalog_item is None:
        return failure(ErrorKind.ITEM_NOT_FOUND)

    inventory, ok = decrement(player.inventory, catalog_item.identifier, amount)
    if not ok:
        return failure(ErrorKind.INSUFFICIENT_QUANTITY)

    # Half price, so buying and selling back never makes money.
    payout = catalog_item.sell_price * amount
    applied = update_player(
        guild_id,
        user_id,
        expected_version=player.version,
        balance_delta=payout,
        inventory=inventory,
    )
    if not applied:
        return failure(ErrorKind.CONCURRENT_MODIFICATION)
    return success(
        f"You have successfully sold {amount}X {catalog_item.identifier} for {payout} coins!"
    )


@store_guarded
def give_item(
    guild_id: int,
    user_id: int,
    item: str,
    amount: int,
    recipient_id: int,
) -> Outcome:
    if amount <= 0:
        return failure(ErrorKind.INVALID_AMOUNT)
    if int(recipient_id) == int(user_id):
        return failure(ErrorKind.INVALID_TARGET)

    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)

    recipient = get_player(guild_id, recipient_id)
    if recipient is None:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)

    catalog_item = find_item(item)
    if catalog_item is None:
        return failure(ErrorKind.ITEM_NOT_FOUND)

    name = catalog_item.identifier
    if player.held(name) == 0:
        return failure(ErrorKind.ITEM_NOT_IN_INVENTORY)

    inventory, ok = decrement(player.inventory, name, amount)
    if not ok:
        return failure(ErrorKind.INSUFFICIENT_QUANTITY)

    applied = update_player(
        guild_id,
        user_id,
        expected_version=player.version,
        inventory=inventory,
    )
    if not applied:
        return failure(ErrorKind.CONCURRENT_MODIFICATION)

    if not credit_player(guild_id, recipient_id, item_name=name, quantity=amount):
        print(f"[give] recipient vanished guild={guild_id} user={recipient_id}; {amount}x {name} lost")
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)
    return success(f"You gave {amount}X {name} to {recipient.mention}!")


@store_guarded
def check_balance(guild_id: int, user_id: int) -> Outcome:
    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)
    return success(f"You have {player.balance} coins!")


@store_guarded
def leaderboard(guild_id: int, size: int | None = None) -> Outcome:
    limit = int(get_app_config("LEADERBOARD_SIZE")) if size is None else max(1, int(size))
    players = get_players(guild_id, limit=limit)
    if not players:
        return success("Nobody is playing the game yet!")
    entries = tuple(
        ListingEntry(
            label=f"#{rank} {player.display_name or player.mention}",
            detail=f"{player.balance} coins",
        )
        for rank, player in enumerate(players, start=1)
    )
    return success(listing=Listing(title="Leaderboard", entries=entries))


@store_guarded
def shop_listing(page: int = 0, page_size: int | None = None) -> Outcome:
    size = int(get_app_config("SHOP_PAGE_SIZE")) if page_size is None else page_size
    chunk, index, total_pages = page_slice(list_items(), size, page)
    entries = tuple(
        ListingEntry(
            label=item.name,
            detail=f"Price: {item.price} coins\n{item.description}",
        )
        for item in chunk
    )
    return success(
        listing=Listing(title="Shop", entries=entries, page=index, total_pages=total_pages)
    )


@store_guarded
def inventory_listing(
    guild_id: int,
    user_id: int,
    display_name: str = "",
    page: int = 0,
    page_size: int | None = None,
) -> Outcome:
    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)
    if not player.inventory:
        return failure(ErrorKind.EMPTY_INVENTORY)

    size = int(get_app_config("INVENTORY_PAGE_SIZE")) if page_size is None else page_size
    chunk, index, total_pages = page_slice(player.inventory, size, page)
    entries = tuple(
        ListingEntry(
            label=f"{emblem_for(stack.name)} {stack.name.title()}".strip(),
            detail=f"Quantity: {stack.quantity}",
        )
        for stack in chunk
    )
    owner = display_name or player.display_name
    title = f"{owner}'s Inventory" if owner else "Inventory"
    return success(
        listing=Listing(
            title=title,
            entries=entries,
            page=index,
            total_pages=total_pages,
            inline=True,
        )
    )


@store_guarded
def pay_coins(guild_id: int, user_id: int, recipient_id: int, amount: int) -> Outcome:
    if amount <= 0:
        return failure(ErrorKind.INVALID_AMOUNT)
    if int(recipient_id) == int(user_id):
        return failure(ErrorKind.INVALID_TARGET)

    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)

    recipient = get_player(guild_id, recipient_id)
    if recipient is None:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)
    if player.balance < amount:
        return failure(ErrorKind.NOT_ENOUGH_COINS)

    if not update_player(guild_id, user_id, expected_version=player.version, balance_delta=-amount):
        return failure(ErrorKind.CONCURRENT_MODIFICATION)

    if not credit_player(guild_id, recipient_id, balance_delta=amount):
        print(f"[pay] recipient vanished guild={guild_id} user={recipient_id}; {amount} coins lost")
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)
    return success(f"You paid {recipient.mention} {amount} coins!")
