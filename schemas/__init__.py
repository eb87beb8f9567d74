"""Схемы передачи данных"""
from .auction import AuctionDTO, ActiveAuctionDTO, FinishedAuctionDTO

__all__ = [
    "AuctionDTO",
    "ActiveAuctionDTO",
    "FinishedAuctionDTO",
]
