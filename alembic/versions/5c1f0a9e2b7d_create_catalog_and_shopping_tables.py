"""create catalog and shopping tables

Revision ID: 5c1f0a9e2b7d
Revises:
Create Date: 2026-10-18 09:12:04.518230

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1f0a9e2b7d"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "stores",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_stores_id"), "stores", ["id"], unique=False)
    op.create_index(op.f("ix_stores_name"), "stores", ["name"], unique=False)

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_products_id"), "products", ["id"], unique=False)
    op.create_index(op.f("ix_products_name"), "products", ["name"], unique=False)

    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("servings", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("servings >= 1", name="ck_recipes_servings_positive"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_recipes_id"), "recipes", ["id"], unique=False)
    op.create_index(op.f("ix_recipes_name"), "recipes", ["name"], unique=False)

    op.create_table(
        "product_stores",
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("store_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["store_id"], ["stores.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("product_id", "store_id"),
    )
    op.create_index(
        op.f("ix_product_stores_store_id"), "product_stores", ["store_id"], unique=False
    )

    op.create_table(
        "recipe_products",
        sa.Column("recipe_id", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["recipe_id"], ["recipes.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("recipe_id", "product_id"),
    )
    op.create_index(
        op.f("ix_recipe_products_product_id"), "recipe_products", ["product_id"], unique=False
    )

    op.create_table(
        "shopping_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("is_purchased", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("purchased_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_shopping_items_id"), "shopping_items", ["id"], unique=False)
    op.create_index(
        op.f("ix_shopping_items_product_id"), "shopping_items", ["product_id"], unique=False
    )
    op.create_index(
        op.f("ix_shopping_items_is_purchased"), "shopping_items", ["is_purchased"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_shopping_items_is_purchased"), table_name="shopping_items")
    op.drop_index(op.f("ix_shopping_items_product_id"), table_name="shopping_items")
    op.drop_index(op.f("ix_shopping_items_id"), table_name="shopping_items")
    op.drop_table("shopping_items")

    op.drop_index(op.f("ix_recipe_products_product_id"), table_name="recipe_products")
    op.drop_table("recipe_products")

    op.drop_index(op.f("ix_product_stores_store_id"), table_name="product_stores")
    op.drop_table("product_stores")

    for table in ("recipes", "products", "stores"):
        op.drop_index(op.f(f"ix_{table}_name"), table_name=table)
        op.drop_index(op.f(f"ix_{table}_id"), table_name=table)
        op.drop_table(table)
