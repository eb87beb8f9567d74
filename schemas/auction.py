"""Схемы передачи данных аукционов"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class AuctionDTO(BaseModel):
    """Аукцион вместе с данными товара (чтение и создание)"""
    item_id: Optional[int] = Field(None, description="ID товара, пусто при создании")
    item_quantity: int = Field(1, ge=1, description="Количество единиц товара")
    expiration_date: datetime = Field(..., description="Время окончания аукциона")
    buy_now_price: Optional[Decimal] = Field(None, ge=0, description="Цена мгновенной покупки")
    starting_price: Decimal = Field(..., ge=0, description="Начальная цена")
    name: str = Field(..., max_length=255, description="Название товара")
    description: Optional[str] = Field(None, description="Описание товара")
    category: str = Field(..., max_length=100, description="Название категории")
    image_url: Optional[str] = Field(None, max_length=500, description="URL изображения")


class ActiveAuctionDTO(BaseModel):
    """Строка списка активных аукционов"""
    auction_id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    category: str
    item_quantity: int
    current_price: Decimal = Field(..., description="Максимальная ставка или начальная цена")
    buy_now_price: Optional[Decimal] = None
    expiration_date: datetime
    seller: str

    class Config:
        from_attributes = True


class FinishedAuctionDTO(BaseModel):
    """Строка архива завершенных аукционов"""
    finished_auction_id: int = Field(..., description="ID записи архива (не ID аукциона)")
    name: str
    image_url: Optional[str] = None
    category: str
    item_quantity: int
    final_price: Decimal
    finished_at: datetime
    seller: str
    buyer: Optional[str] = None

    class Config:
        from_attributes = True
