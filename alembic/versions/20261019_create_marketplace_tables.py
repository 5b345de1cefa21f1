"""create vendors, products, ratings and vendor_sessions

Revision ID: 20261019_create_marketplace
Revises:
Create Date: 2026-10-19 09:12:40.118532

"""
from alembic import op
import sqlalchemy as sa


revision = "20261019_create_marketplace"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "vendors",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("vendor_name", sa.String(255), nullable=False),
        sa.Column("owner_name", sa.String(255), nullable=False),
        sa.Column("contact_number", sa.String(20), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("business_category", sa.String(100), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("logo_url", sa.String(500), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),

        # maintained by the rating aggregator only
        sa.Column("avg_rating", sa.Numeric(3, 2), server_default="0", nullable=False),
        sa.Column("total_reviews", sa.Integer(), server_default="0", nullable=False),

        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("idx_vendors_created_at", "vendors", ["created_at"])

    op.create_table(
        "products",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("vendor_id", sa.String(), sa.ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price_range", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("idx_products_vendor_created", "products", ["vendor_id", "created_at"])

    op.create_table(
        "ratings",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("vendor_id", sa.String(), sa.ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("client_name", sa.String(255), nullable=False),
        sa.Column("project_name", sa.String(255), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comments", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_ratings_rating_range"),
    )
    op.create_index("idx_ratings_vendor_created", "ratings", ["vendor_id", "created_at"])

    op.create_table(
        "vendor_sessions",
        sa.Column("sid", sa.String(64), primary_key=True),
        sa.Column("vendor_id", sa.String(), sa.ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
    )
    op.create_index("idx_vendor_sessions_expires", "vendor_sessions", ["expires_at"])

def downgrade():
    op.drop_index("idx_vendor_sessions_expires", table_name="vendor_sessions")
    op.drop_table("vendor_sessions")
    op.drop_index("idx_ratings_vendor_created", table_name="ratings")
    op.drop_table("ratings")
    op.drop_index("idx_products_vendor_created", table_name="products")
    op.drop_table("products")
    op.drop_index("idx_vendors_created_at", table_name="vendors")
    op.drop_table("vendors")
