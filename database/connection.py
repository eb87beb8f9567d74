"""Подключение к базе данных"""
from sqlalchemy import BigInteger, Integer
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from config import settings

# Создаем движок для асинхронной работы
engine = create_async_engine(
    settings.database_url,
    echo=settings.DB_ECHO,
    future=True
)

# Создаем фабрику сессий
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Базовый класс для моделей
Base = declarative_base()

# SQLite автоинкрементирует только INTEGER PRIMARY KEY
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


async def get_session() -> AsyncSession:
    """Получить сессию базы данных"""
    async with async_session_maker() as session:
        yield session


async def init_db():
    """Создать таблицы (только для разработки)"""
    # Импорт регистрирует модели в Base.metadata
    import database.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
