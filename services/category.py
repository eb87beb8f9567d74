"""Сервис для работы с категориями товаров"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from database.models.item_category import ItemCategory
from services.exceptions import CategoryNotFoundError


async def get_all_categories(session: AsyncSession) -> list[ItemCategory]:
    """Получить все категории"""
    result = await session.execute(
        select(ItemCategory).order_by(ItemCategory.name.asc())
    )
    return list(result.scalars().all())


async def get_category_by_name(session: AsyncSession, name: str) -> ItemCategory:
    """Получить категорию по названию"""
    result = await session.execute(
        select(ItemCategory).where(ItemCategory.name == name)
    )
    category = result.scalar_one_or_none()

    if not category:
        raise CategoryNotFoundError(f"Категория '{name}' не найдена")

    return category
