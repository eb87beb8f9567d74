import os

# Настройки читаются при импорте config, поэтому задаем их до импорта моделей
os.environ.setdefault("BOT_TOKEN", "123456:test-token")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database.connection import Base
from database.models import Auction, Item, ItemCategory, User


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database for each test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # pysqlite manages BEGIN itself and breaks SAVEPOINT; let SQLAlchemy emit it
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def seed(session):
    """Categories and users every test can rely on"""
    flowers = ItemCategory(name="Цветы")
    electronics = ItemCategory(name="Электроника")
    alice = User(username="alice", email="alice@example.com")
    bob = User(username="bob")
    carol = User(username="carol")
    session.add_all([flowers, electronics, alice, bob, carol])
    await session.commit()

    return SimpleNamespace(
        flowers=flowers,
        electronics=electronics,
        alice=alice,
        bob=bob,
        carol=carol,
    )


async def make_auction(
    session,
    seller,
    category,
    name,
    starting_price="10.00",
    buy_now_price=None,
    expires_in=timedelta(days=3),
    description=None,
):
    """Insert an item with its auction directly, bypassing the service"""
    item = Item(
        name=name,
        description=description,
        image_url=f"https://img.example.com/{name}.png",
        modified_at=datetime.now(timezone.utc),
        category=category,
    )
    auction = Auction(
        item_quantity=1,
        starting_price=Decimal(starting_price),
        buy_now_price=Decimal(buy_now_price) if buy_now_price else None,
        expiration_date=datetime.now(timezone.utc) + expires_in,
        seller=seller,
        item=item,
    )
    session.add_all([item, auction])
    await session.commit()
    return auction
