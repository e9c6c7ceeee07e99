"""Northwind schema — categories, customers, employees, suppliers, products, orders, order lines.

Revision ID: 001_northwind
Revises: None
Create Date: 2026-10-18

Table and column names follow the Northwind SQLite database so an existing
northwind.db can be stamped at this revision instead of migrated.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_northwind"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Categories",
        sa.Column("CategoryID", sa.Integer, primary_key=True),
        sa.Column("CategoryName", sa.String(15), nullable=False),
        sa.Column("Description", sa.Text, nullable=True),
    )

    op.create_table(
        "Customers",
        sa.Column("CustomerID", sa.String(40), primary_key=True),
        sa.Column("CompanyName", sa.String(40), nullable=False),
        sa.Column("ContactName", sa.String(30), nullable=True),
        sa.Column("City", sa.String(15), nullable=True),
        sa.Column("Country", sa.String(15), nullable=True),
    )

    op.create_table(
        "Employees",
        sa.Column("EmployeeID", sa.Integer, primary_key=True),
        sa.Column("LastName", sa.String(20), nullable=False),
        sa.Column("FirstName", sa.String(10), nullable=False),
        sa.Column("Title", sa.String(30), nullable=True),
    )

    op.create_table(
        "Suppliers",
        sa.Column("SupplierID", sa.Integer, primary_key=True),
        sa.Column("CompanyName", sa.String(40), nullable=False),
        sa.Column("Country", sa.String(15), nullable=True),
    )

    op.create_table(
        "Products",
        sa.Column("ProductID", sa.Integer, primary_key=True),
        sa.Column("ProductName", sa.String(40), nullable=False),
        sa.Column("SupplierID", sa.Integer, sa.ForeignKey("Suppliers.SupplierID"), nullable=True),
        sa.Column("CategoryID", sa.Integer, sa.ForeignKey("Categories.CategoryID"), nullable=True),
        sa.Column("QuantityPerUnit", sa.String(20), nullable=True),
        sa.Column("UnitPrice", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("UnitsInStock", sa.Integer, nullable=True, server_default="0"),
        sa.Column("UnitsOnOrder", sa.Integer, nullable=True, server_default="0"),
        sa.Column("ReorderLevel", sa.Integer, nullable=True, server_default="0"),
        sa.Column("Discontinued", sa.String(1), nullable=False, server_default="0"),
    )

    op.create_table(
        "Orders",
        sa.Column("OrderID", sa.Integer, primary_key=True),
        sa.Column("CustomerID", sa.String(40), sa.ForeignKey("Customers.CustomerID"), nullable=True),
        sa.Column("EmployeeID", sa.Integer, sa.ForeignKey("Employees.EmployeeID"), nullable=True),
        sa.Column("OrderDate", sa.String(30), nullable=True),
        sa.Column("RequiredDate", sa.String(30), nullable=True),
        sa.Column("ShippedDate", sa.String(30), nullable=True),
        sa.Column("ShipVia", sa.Integer, nullable=True),
        sa.Column("Freight", sa.Numeric(10, 2), nullable=True, server_default="0"),
        sa.Column("ShipName", sa.String(40), nullable=True),
        sa.Column("ShipAddress", sa.String(60), nullable=True),
        sa.Column("ShipCity", sa.String(15), nullable=True),
        sa.Column("ShipRegion", sa.String(15), nullable=True),
        sa.Column("ShipPostalCode", sa.String(10), nullable=True),
        sa.Column("ShipCountry", sa.String(15), nullable=True),
    )
    op.create_index("ix_orders_customer_id", "Orders", ["CustomerID"])
    op.create_index("ix_orders_employee_id", "Orders", ["EmployeeID"])

    op.create_table(
        "OrderDetails",
        sa.Column("OrderID", sa.Integer, sa.ForeignKey("Orders.OrderID"), primary_key=True),
        sa.Column("ProductID", sa.Integer, sa.ForeignKey("Products.ProductID"), primary_key=True),
        sa.Column("UnitPrice", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("Quantity", sa.Integer, nullable=False, server_default="1"),
        sa.Column("Discount", sa.Float, nullable=False, server_default="0"),
    )


def downgrade() -> None:
    op.drop_table("OrderDetails")
    op.drop_index("ix_orders_employee_id", table_name="Orders")
    op.drop_index("ix_orders_customer_id", table_name="Orders")
    op.drop_table("Orders")
    op.drop_table("Products")
    op.drop_table("Suppliers")
    op.drop_table("Employees")
    op.drop_table("Customers")
    op.drop_table("Categories")
