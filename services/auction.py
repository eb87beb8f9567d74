"""Сервис для работы с аукционами"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from database.dao.auction_dao import AuctionDAO
from database.models.auction import Auction
from database.models.item import Item
from database.models.watchlist import AuctionRelation
from database.procedures import (
    ADD_AUCTION_TO_WATCHLIST,
    BUY_NOW,
    MOVE_AUCTION_TO_FINISHED,
    PLACE_BID,
    call_procedure,
)
from schemas.auction import ActiveAuctionDTO, AuctionDTO, FinishedAuctionDTO
from services.category import get_all_categories, get_category_by_name
from services.exceptions import AuctionNotFoundError
from services.user import get_user

logger = logging.getLogger(__name__)


async def find_all_categories(session: AsyncSession) -> list[str]:
    """Получить названия всех категорий"""
    categories = await get_all_categories(session)
    return [category.name for category in categories]


async def find_auctions(
    session: AsyncSession,
    search_string: Optional[str],
    category: Optional[str],
    offset: int,
    limit: int
) -> list[ActiveAuctionDTO]:
    """Получить страницу активных аукционов"""
    logger.info(f"Получение аукционов: поиск='{search_string}', категория={category}, offset={offset}, limit={limit}")
    return await AuctionDAO(session).find_all_paged(search_string, category, offset, limit)


async def find_archived_auctions(
    session: AsyncSession,
    user_id: int,
    offset: int,
    limit: int
) -> list[FinishedAuctionDTO]:
    """Получить страницу завершенных аукционов пользователя"""
    logger.info(f"Получение архива аукционов пользователя {user_id}")
    return await AuctionDAO(session).find_archived_auctions(user_id, offset, limit)


async def find_my_auctions(
    session: AsyncSession,
    offset: int,
    limit: int,
    user_id: int,
    relation_type: str
) -> list[ActiveAuctionDTO]:
    """Получить аукционы пользователя по типу связи"""
    logger.info(f"Получение аукционов пользователя {user_id} ({relation_type})")
    return await AuctionDAO(session).find_my_auctions(offset, limit, user_id, relation_type)


async def find_by_id(session: AsyncSession, auction_id: int) -> AuctionDTO:
    """Получить аукцион с данными товара"""
    result = await session.execute(
        select(Auction)
        .where(Auction.id == auction_id)
        .options(selectinload(Auction.item).selectinload(Item.category))
    )
    auction = result.scalar_one_or_none()

    if not auction:
        raise AuctionNotFoundError(f"Аукцион {auction_id} не найден")

    item = auction.item
    return AuctionDTO(
        item_id=item.id,
        item_quantity=auction.item_quantity,
        expiration_date=auction.expiration_date,
        buy_now_price=auction.buy_now_price,
        starting_price=auction.starting_price,
        name=item.name,
        description=item.description,
        category=item.category.name,
        image_url=item.image_url,
    )


async def _create_item_and_auction(
    session: AsyncSession,
    auction_dto: AuctionDTO,
    user_id: int
) -> Auction:
    """Добавить товар и аукцион в текущую транзакцию"""
    category = await get_category_by_name(session, auction_dto.category)
    seller = await get_user(session, user_id)

    item = Item(
        name=auction_dto.name,
        description=auction_dto.description,
        image_url=auction_dto.image_url,
        modified_at=datetime.now(timezone.utc),
        category=category
    )
    session.add(item)
    await session.flush()

    auction = Auction(
        item_quantity=auction_dto.item_quantity,
        starting_price=auction_dto.starting_price,
        buy_now_price=auction_dto.buy_now_price,
        expiration_date=auction_dto.expiration_date,
        seller=seller,
        item=item
    )
    session.add(auction)
    await session.flush()
    return auction


async def save_auction(
    session: AsyncSession,
    auction_dto: AuctionDTO,
    user_id: int
) -> Auction:
    """Создать товар и аукцион в одной транзакции.

    Если сессия уже открыла транзакцию (например, после чтения категорий),
    обе записи выполняются в savepoint, после чего транзакция фиксируется.
    При любой ошибке откатываются обе записи.
    """
    if session.in_transaction():
        async with session.begin_nested():
            auction = await _create_item_and_auction(session, auction_dto, user_id)
        await session.commit()
    else:
        async with session.begin():
            auction = await _create_item_and_auction(session, auction_dto, user_id)

    logger.info(f"Аукцион {auction.id} создан пользователем {user_id} (товар {auction.item_id})")
    return auction


async def place_bid_procedure(
    session: AsyncSession,
    auction_id: int,
    user_id: int,
    bid_value: Decimal
) -> None:
    """Сделать ставку (проверки выполняет процедура place_bid)"""
    logger.info(f"Ставка {bid_value} на аукцион {auction_id} от пользователя {user_id}")
    await call_procedure(
        session,
        PLACE_BID,
        auction_id=auction_id,
        user_id=user_id,
        bid_value=bid_value
    )


async def move_auction_to_finished(
    session: AsyncSession,
    auction_id: int,
    bid_value: Decimal
) -> None:
    """Завершить аукцион с итоговой ценой"""
    logger.info(f"Аукцион {auction_id} завершен с ценой {bid_value}")
    await call_procedure(
        session,
        MOVE_AUCTION_TO_FINISHED,
        auction_id=auction_id,
        bid_value=bid_value
    )


async def buy_now(session: AsyncSession, auction_id: int, user_id: int) -> None:
    """Купить товар по цене "купить сейчас" """
    logger.info(f"Аукцион {auction_id} выкуплен пользователем {user_id}")
    await call_procedure(
        session,
        BUY_NOW,
        auction_id=auction_id,
        user_id=user_id
    )


async def add_auction_to_watchlist(
    session: AsyncSession,
    user_id: int,
    auction_id: int,
    relation: Union[AuctionRelation, str]
) -> None:
    """Связать аукцион с пользователем (наблюдение, ставки)"""
    relation_value = relation.value if isinstance(relation, AuctionRelation) else relation
    logger.info(f"Аукцион {auction_id} добавлен пользователю {user_id} как '{relation_value}'")
    await call_procedure(
        session,
        ADD_AUCTION_TO_WATCHLIST,
        user_id=user_id,
        auction_id=auction_id,
        relation=relation_value
    )
