"""Seed German brands and models

Revision ID: 002
Revises: 001
Create Date: 2025-01-28 15:10:00.000000

"""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Union

import sqlalchemy as sa

from alembic import op
from app.adapters.outbound.catalog.seed import seed_brands, seed_models

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    now = datetime.now(timezone.utc)
    brands = sa.table(
        "car_brands",
        sa.column("id", sa.String),
        sa.column("name", sa.Text),
        sa.column("logo_url", sa.Text),
        sa.column("created_at", sa.DateTime(timezone=True)),
    )
    models = sa.table(
        "car_models",
        sa.column("id", sa.String),
        sa.column("brand_id", sa.String),
        sa.column("name", sa.Text),
        sa.column("created_at", sa.DateTime(timezone=True)),
    )
    op.bulk_insert(brands, [{**row, "created_at": now} for row in seed_brands()])
    op.bulk_insert(models, [{**row, "created_at": now} for row in seed_models()])


def downgrade() -> None:
    model_ids = [row["id"] for row in seed_models()]
    brand_ids = [row["id"] for row in seed_brands()]
    models = sa.table("car_models", sa.column("id", sa.String))
    brands = sa.table("car_brands", sa.column("id", sa.String))
    op.execute(models.delete().where(models.c.id.in_(model_ids)))
    op.execute(brands.delete().where(brands.c.id.in_(brand_ids)))
