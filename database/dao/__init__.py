"""Объекты доступа к данным"""
from .auction_dao import AuctionDAO

__all__ = ["AuctionDAO"]
