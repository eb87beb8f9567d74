"""Модели базы данных"""
from .user import User
from .item_category import ItemCategory
from .item import Item
from .auction import Auction
from .bid import Bid
from .finished_auction import FinishedAuction
from .watchlist import WatchlistEntry, AuctionRelation

__all__ = [
    "User",
    "ItemCategory",
    "Item",
    "Auction",
    "Bid",
    "FinishedAuction",
    "WatchlistEntry",
    "AuctionRelation",
]
