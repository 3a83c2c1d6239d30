import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from storefront.core.database import build_engine, create_db_and_tables, get_async_session
from storefront.core.security import create_access_token
from storefront.main import app
from storefront.models import Product, User, UserRole


@pytest.fixture()
async def engine():
    """A fresh in-memory database per test."""
    test_engine = build_engine("sqlite+aiosqlite://")
    await create_db_and_tables(bind=test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture()
def session_maker(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture()
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture()
async def client(session_maker):
    async def override_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


async def _add_user(db: AsyncSession, user_id: str, role: UserRole) -> User:
    user = User(id=user_id, email=f"{user_id}@example.com", first_name=user_id, role=role)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture()
async def seller_a(db):
    return await _add_user(db, "seller-a", UserRole.SELLER)


@pytest.fixture()
async def seller_b(db):
    return await _add_user(db, "seller-b", UserRole.SELLER)


@pytest.fixture()
async def buyer(db):
    return await _add_user(db, "buyer-1", UserRole.BUYER)


@pytest.fixture()
def auth_headers():
    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers


@pytest.fixture()
def make_product(db):
    """Insert a product directly through the session."""

    async def _make(owner: User, **fields) -> Product:
        data = {"name": "Shoe", "brand": "Acme", "price": 10.0, "image": "https://img.example.com/shoe.png"}
        data.update(fields)
        product = Product(owner_id=owner.id, **data)
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    return _make


@pytest.fixture()
def fetch_product(session_maker):
    """Read a product back through a fresh session, bypassing any cached state."""

    async def _fetch(product_id):
        async with session_maker() as session:
            return await session.get(Product, product_id)

    return _fetch


@pytest.fixture()
def count_products(session_maker):
    async def _count() -> int:
        async with session_maker() as session:
            result = await session.execute(select(func.count()).select_from(Product))
            return result.scalar_one()

    return _count
