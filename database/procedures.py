"""Вызовы хранимых процедур"""
from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.ext.asyncio import AsyncSession

# Порядок параметров совпадает с сигнатурами процедур в БД
PLACE_BID = text("CALL place_bid(:auction_id, :user_id, :bid_value)")
MOVE_AUCTION_TO_FINISHED = text("CALL move_auction_to_finished(:auction_id, :bid_value)")
BUY_NOW = text("CALL buy_now(:auction_id, :user_id)")
ADD_AUCTION_TO_WATCHLIST = text("CALL add_auction_to_watchlist(:user_id, :auction_id, :relation)")


async def call_procedure(session: AsyncSession, statement: TextClause, **params) -> None:
    """Выполнить хранимую процедуру и зафиксировать транзакцию.

    Ошибка процедуры пробрасывается как есть, commit при этом не выполняется.
    """
    await session.execute(statement, params)
    await session.commit()
