from discord import app_commands

from marybot.commands.balance import setup_balance, setup_leaderboard
from marybot.commands.buy import setup_buy
from marybot.commands.divorce import setup_divorce
from marybot.commands.earn import setup_beg, setup_daily, setup_rob
from marybot.commands.give import setup_give
from marybot.commands.inventory import setup_inventory
from marybot.commands.marriage import setup_marriage
from marybot.commands.pay import setup_pay
from marybot.commands.sell import setup_sell
from marybot.commands.shop import setup_shop
from marybot.commands.use import setup_use


def setup_commands(tree: app_commands.CommandTree) -> None:
    setup_shop(tree)
    setup_inventory(tree)
    setup_buy(tree)
    setup_sell(tree)
    setup_give(tree)
    setup_use(tree)
    setup_divorce(tree)
    setup_marriage(tree)
    setup_balance(tree)
    setup_leaderboard(tree)
    setup_daily(tree)
    setup_beg(tree)
    setup_rob(tree)
    setup_pay(tree)
