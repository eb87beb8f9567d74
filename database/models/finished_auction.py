"""Модель завершенного аукциона"""
from sqlalchemy import Column, BigInteger, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database.connection import Base, BigIntPK


class FinishedAuction(Base):
    """Архивная запись аукциона (создается процедурами move_auction_to_finished и buy_now)"""
    __tablename__ = "finished_auctions"

    id = Column(BigIntPK, primary_key=True, index=True)
    item_id = Column(BigInteger, ForeignKey("items.id"), nullable=False, index=True)
    item_quantity = Column(Integer, nullable=False)
    seller_id = Column(BigInteger, ForeignKey("users.id"), nullable=False, index=True)
    buyer_id = Column(BigInteger, ForeignKey("users.id"), nullable=True, index=True)  # Нет покупателя, если ставок не было
    final_price = Column(Numeric(12, 2), nullable=False)
    finished_at = Column(DateTime(timezone=True), nullable=False, index=True)

    # Связи
    item = relationship("Item")
    seller = relationship("User", foreign_keys=[seller_id])
    buyer = relationship("User", foreign_keys=[buyer_id])
