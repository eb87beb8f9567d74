"""Сервис для работы с пользователями"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from database.models.user import User
from services.exceptions import UserNotFoundError


async def get_user(session: AsyncSession, user_id: int) -> User:
    """Получить пользователя по ID"""
    result = await session.execute(
        select(User).where(User.id == user_id)
    )
    user = result.scalar_one_or_none()

    if not user:
        raise UserNotFoundError(f"Пользователь {user_id} не найден")

    return user


async def create_user(
    session: AsyncSession,
    username: str,
    email: str = None
) -> User:
    """Создать пользователя"""
    user = User(username=username, email=email)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user
