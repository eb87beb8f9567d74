"""Постраничные выборки аукционов"""
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import Numeric, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased
from database.models.auction import Auction
from database.models.bid import Bid
from database.models.finished_auction import FinishedAuction
from database.models.item import Item
from database.models.item_category import ItemCategory
from database.models.user import User
from database.models.watchlist import AuctionRelation, WatchlistEntry
from schemas.auction import ActiveAuctionDTO, FinishedAuctionDTO
from services.exceptions import InvalidPageError
from config import settings


def check_page(offset: int, limit: int) -> None:
    """Проверить границы страницы"""
    if offset < 0:
        raise InvalidPageError(f"offset не может быть отрицательным: {offset}")
    if limit <= 0:
        raise InvalidPageError(f"limit должен быть положительным: {limit}")
    if limit > settings.MAX_PAGE_SIZE:
        raise InvalidPageError(f"limit не может превышать {settings.MAX_PAGE_SIZE}: {limit}")


class AuctionDAO:
    """Запросы к активным и завершенным аукционам, возвращающие DTO"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _active_auctions_query() -> Select:
        """Активные аукционы с текущей ценой и данными товара"""
        top_bid = (
            select(func.max(Bid.bid_value))
            .where(Bid.auction_id == Auction.id)
            .correlate(Auction)
            .scalar_subquery()
        )
        current_price = func.coalesce(top_bid, Auction.starting_price, type_=Numeric(12, 2))

        return (
            select(
                Auction.id.label("auction_id"),
                Item.name.label("name"),
                Item.description.label("description"),
                Item.image_url.label("image_url"),
                ItemCategory.name.label("category"),
                Auction.item_quantity.label("item_quantity"),
                current_price.label("current_price"),
                Auction.buy_now_price.label("buy_now_price"),
                Auction.expiration_date.label("expiration_date"),
                User.username.label("seller"),
            )
            .select_from(Auction)
            .join(Item, Auction.item_id == Item.id)
            .join(ItemCategory, Item.category_id == ItemCategory.id)
            .join(User, Auction.seller_id == User.id)
            .where(Auction.expiration_date > datetime.now(timezone.utc))
        )

    async def _fetch_active(self, query: Select, offset: int, limit: int) -> list[ActiveAuctionDTO]:
        result = await self.session.execute(
            query
            .order_by(Auction.expiration_date.asc(), Auction.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return [ActiveAuctionDTO.model_validate(row) for row in result.all()]

    async def find_all_paged(
        self,
        search_string: Optional[str],
        category: Optional[str],
        offset: int,
        limit: int
    ) -> list[ActiveAuctionDTO]:
        """Найти активные аукционы по строке поиска и категории"""
        check_page(offset, limit)

        query = self._active_auctions_query()
        if search_string:
            query = query.where(Item.name.ilike(f"%{search_string}%"))
        if category:
            query = query.where(ItemCategory.name == category)

        return await self._fetch_active(query, offset, limit)

    async def find_my_auctions(
        self,
        offset: int,
        limit: int,
        user_id: int,
        relation_type: str
    ) -> list[ActiveAuctionDTO]:
        """Найти активные аукционы, связанные с пользователем"""
        check_page(offset, limit)
        relation = AuctionRelation(relation_type)

        query = self._active_auctions_query()
        if relation == AuctionRelation.SELLING:
            query = query.where(Auction.seller_id == user_id)
        else:
            query = (
                query
                .join(WatchlistEntry, WatchlistEntry.auction_id == Auction.id)
                .where(
                    WatchlistEntry.user_id == user_id,
                    WatchlistEntry.relation == relation.value
                )
            )

        return await self._fetch_active(query, offset, limit)

    async def find_archived_auctions(
        self,
        user_id: int,
        offset: int,
        limit: int
    ) -> list[FinishedAuctionDTO]:
        """Найти завершенные аукционы, где пользователь продавец или покупатель"""
        check_page(offset, limit)

        seller = aliased(User)
        buyer = aliased(User)
        result = await self.session.execute(
            select(
                FinishedAuction.id.label("finished_auction_id"),
                Item.name.label("name"),
                Item.image_url.label("image_url"),
                ItemCategory.name.label("category"),
                FinishedAuction.item_quantity.label("item_quantity"),
                FinishedAuction.final_price.label("final_price"),
                FinishedAuction.finished_at.label("finished_at"),
                seller.username.label("seller"),
                buyer.username.label("buyer"),
            )
            .select_from(FinishedAuction)
            .join(Item, FinishedAuction.item_id == Item.id)
            .join(ItemCategory, Item.category_id == ItemCategory.id)
            .join(seller, FinishedAuction.seller_id == seller.id)
            .outerjoin(buyer, FinishedAuction.buyer_id == buyer.id)
            .where(or_(FinishedAuction.seller_id == user_id, FinishedAuction.buyer_id == user_id))
            .order_by(FinishedAuction.finished_at.desc(), FinishedAuction.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [FinishedAuctionDTO.model_validate(row) for row in result.all()]
