"""Модель пользователя"""
from sqlalchemy import Column, String, DateTime, Numeric
from sqlalchemy.sql import func
from database.connection import Base, BigIntPK


class User(Base):
    """Модель пользователя площадки"""
    __tablename__ = "users"

    id = Column(BigIntPK, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), nullable=True)
    balance = Column(Numeric(12, 2), default=0, nullable=False)  # Меняется только процедурами
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
