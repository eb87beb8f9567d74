"""Модель аукциона"""
from sqlalchemy import Column, BigInteger, Integer, Numeric, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from database.connection import Base, BigIntPK


class Auction(Base):
    """Модель активного аукциона"""
    __tablename__ = "auctions"

    id = Column(BigIntPK, primary_key=True, index=True)
    item_quantity = Column(Integer, nullable=False)
    starting_price = Column(Numeric(12, 2), nullable=False)  # Начальная цена
    buy_now_price = Column(Numeric(12, 2), nullable=True)  # Цена "купить сейчас"
    expiration_date = Column(DateTime(timezone=True), nullable=False, index=True)
    seller_id = Column(BigInteger, ForeignKey("users.id"), nullable=False, index=True)
    item_id = Column(BigInteger, ForeignKey("items.id"), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("item_quantity >= 1", name="ck_auction_item_quantity"),
    )

    # Связи
    seller = relationship("User", foreign_keys=[seller_id])
    item = relationship("Item")
    bids = relationship("Bid", back_populates="auction", order_by="Bid.created_at.desc()")
