"""Модель категории товара"""
from sqlalchemy import Column, String
from database.connection import Base, BigIntPK


class ItemCategory(Base):
    """Категория товара (справочник, заполняется вне сервиса)"""
    __tablename__ = "item_categories"

    id = Column(BigIntPK, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
