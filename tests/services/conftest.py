"""Service test fixtures — seeded in-memory SQLite + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager set for the readiness probe

Seeded snapshot (net order totals: 10248=218, 10249=114, 10250=162, 10251=20):
    - 10248 ALFKI  emp 1  1996-07-04  shipped before required   -> Shipped
    - 10249 ANATR  emp 1  1996-07-05  shipped after required    -> Late
    - 10250 ALFKI  emp 2  1996-08-08  not shipped               -> Pending
    - 10251 (none) emp 2  1996-09-01  shipped, no required date -> Shipped
    - 10252 ANATR  (none) no dates, no lines                    -> Pending
"""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from reporting.db.base import Base
from reporting.infrastructure.database import get_db, DatabaseSessionManager
from reporting.main import app
from reporting.models import (
    Category, Customer, Employee, Order, OrderDetail, Product, Supplier,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_northwind(test_db):
    """Insert the small Northwind snapshot described in the module docstring."""
    test_db.add_all([
        Category(category_id=1, category_name="Beverages"),
        Category(category_id=2, category_name="Condiments"),
        Category(category_id=3, category_name="Seafood"),
        Supplier(supplier_id=1, company_name="Exotic Liquids", country="UK"),
        Supplier(supplier_id=2, company_name="New Orleans Cajun Delights", country="USA"),
        Customer(customer_id="ALFKI", company_name="Alfreds Futterkiste", country="Germany"),
        Customer(customer_id="ANATR", company_name="Ana Trujillo Emparedados", country="Mexico"),
        Customer(customer_id="BONAP", company_name="Bon app'", country="France"),
        Employee(employee_id=1, first_name="Nancy", last_name="Davolio"),
        Employee(employee_id=2, first_name="Andrew", last_name="Fuller"),
        Employee(employee_id=3, first_name="Janet", last_name="Leverling"),
    ])
    await test_db.flush()
    test_db.add_all([
        Product(product_id=1, product_name="Chai", supplier_id=1, category_id=1,
                unit_price=Decimal("18.00"), units_in_stock=39, units_on_order=0,
                reorder_level=10),
        Product(product_id=2, product_name="Chang", supplier_id=1, category_id=1,
                unit_price=Decimal("19.00"), units_in_stock=0, units_on_order=40,
                reorder_level=25),
        Product(product_id=3, product_name="Aniseed Syrup", supplier_id=2, category_id=2,
                unit_price=Decimal("10.00"), units_in_stock=5, units_on_order=70,
                reorder_level=25),
        Product(product_id=4, product_name="Ikura", supplier_id=2, category_id=3,
                unit_price=Decimal("31.00"), units_in_stock=None, units_on_order=None,
                reorder_level=None),
        Order(order_id=10248, customer_id="ALFKI", employee_id=1,
              order_date="1996-07-04", required_date="1996-08-01",
              shipped_date="1996-07-16", ship_region=None, ship_country="Germany"),
        Order(order_id=10249, customer_id="ANATR", employee_id=1,
              order_date="1996-07-05", required_date="1996-07-10",
              shipped_date="1996-07-20", ship_region="  ", ship_country="Mexico"),
        Order(order_id=10250, customer_id="ALFKI", employee_id=2,
              order_date="1996-08-08", required_date="1996-09-05",
              shipped_date=None, ship_region="BC", ship_country="Canada"),
        Order(order_id=10251, customer_id=None, employee_id=2,
              order_date="1996-09-01", required_date=None,
              shipped_date="1996-09-03", ship_region="BC", ship_country="Canada"),
        Order(order_id=10252, customer_id="ANATR", employee_id=None,
              order_date=None, required_date=None, shipped_date=None,
              ship_country="Mexico"),
    ])
    await test_db.flush()
    test_db.add_all([
        OrderDetail(order_id=10248, product_id=1, unit_price=Decimal("14.00"),
                    quantity=12, discount=0.0),
        OrderDetail(order_id=10248, product_id=3, unit_price=Decimal("10.00"),
                    quantity=5, discount=0.0),
        OrderDetail(order_id=10249, product_id=2, unit_price=Decimal("15.20"),
                    quantity=10, discount=0.25),
        OrderDetail(order_id=10250, product_id=1, unit_price=Decimal("18.00"),
                    quantity=10, discount=0.1),
        OrderDetail(order_id=10251, product_id=3, unit_price=Decimal("10.00"),
                    quantity=2, discount=0.0),
    ])
    await test_db.commit()


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager
