"""Create marketplace tables

Revision ID: 001
Revises:
Create Date: 2025-01-28 14:54:39.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

car_condition = sa.Enum("new", "used", "certified", name="car_condition")
transmission_type = sa.Enum("automatic", "manual", name="transmission_type")


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("full_name", sa.Text(), nullable=True),
        sa.Column("phone", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "car_brands",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "car_models",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("brand_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["brand_id"], ["car_brands.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("brand_id", "name", name="uq_car_models_brand_id_name"),
    )
    op.create_index(op.f("ix_car_models_brand_id"), "car_models", ["brand_id"], unique=False)
    op.create_table(
        "car_listings",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("seller_id", sa.String(length=36), nullable=False),
        sa.Column("brand_id", sa.String(length=36), nullable=False),
        sa.Column("model_id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("mileage", sa.Integer(), nullable=False),
        sa.Column("condition", car_condition, nullable=False),
        sa.Column("transmission", transmission_type, nullable=False),
        sa.Column("color", sa.Text(), nullable=True),
        sa.Column("vin", sa.Text(), nullable=True),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["seller_id"], ["profiles.id"]),
        sa.ForeignKeyConstraint(["brand_id"], ["car_brands.id"]),
        sa.ForeignKeyConstraint(["model_id"], ["car_models.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("seller_id", "brand_id", "model_id", "created_at"):
        op.create_index(
            op.f(f"ix_car_listings_{column}"), "car_listings", [column], unique=False
        )


def downgrade() -> None:
    for column in ("seller_id", "brand_id", "model_id", "created_at"):
        op.drop_index(op.f(f"ix_car_listings_{column}"), table_name="car_listings")
    op.drop_table("car_listings")
    op.drop_index(op.f("ix_car_models_brand_id"), table_name="car_models")
    op.drop_table("car_models")
    op.drop_table("car_brands")
    op.drop_table("profiles")
    car_condition.drop(op.get_bind(), checkfirst=True)
    transmission_type.drop(op.get_bind(), checkfirst=True)
