"""Модель связи пользователя с аукционом"""
from sqlalchemy import Column, BigInteger, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from database.connection import Base, BigIntPK


class AuctionRelation(str, enum.Enum):
    """Тип связи пользователя с аукционом"""
    WATCHING = "watching"  # Наблюдает
    BIDDING = "bidding"  # Делал ставки
    SELLING = "selling"  # Продает (берется из auctions.seller_id)


class WatchlistEntry(Base):
    """Модель для отслеживания аукционов пользователем"""
    __tablename__ = "user_auctions"

    id = Column(BigIntPK, primary_key=True, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id"), nullable=False, index=True)
    auction_id = Column(BigInteger, ForeignKey("auctions.id"), nullable=False, index=True)
    relation = Column(String(50), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Одна связь каждого типа на пару пользователь-аукцион
    __table_args__ = (
        UniqueConstraint('user_id', 'auction_id', 'relation', name='uq_user_auction_relation'),
    )

    # Связи
    user = relationship("User")
    auction = relationship("Auction")
