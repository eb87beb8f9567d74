"""Модель ставки"""
from sqlalchemy import Column, BigInteger, Numeric, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database.connection import Base, BigIntPK


class Bid(Base):
    """Модель ставки на аукционе (пишется процедурой place_bid)"""
    __tablename__ = "bids"

    id = Column(BigIntPK, primary_key=True, index=True)
    auction_id = Column(BigInteger, ForeignKey("auctions.id"), nullable=False, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id"), nullable=False, index=True)
    bid_value = Column(Numeric(12, 2), nullable=False)  # Сумма ставки
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    # Связи
    auction = relationship("Auction", back_populates="bids")
    user = relationship("User", backref="bids")
