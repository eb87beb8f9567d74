"""Модель товара"""
from sqlalchemy import Column, BigInteger, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database.connection import Base, BigIntPK


class Item(Base):
    """Модель товара, выставляемого на аукцион"""
    __tablename__ = "items"

    id = Column(BigIntPK, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    modified_at = Column(DateTime(timezone=True), nullable=False)
    category_id = Column(BigInteger, ForeignKey("item_categories.id"), nullable=False, index=True)

    # Связи
    category = relationship("ItemCategory")
