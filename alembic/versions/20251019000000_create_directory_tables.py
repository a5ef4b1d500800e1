"""Create directory tables (Software, Feature, PricingPlan, SupportOption, Review, ContactSubmission, SoftwareInterest).

Revision ID: 20251019000000
Revises:
Create Date: 2025-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20251019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Software",
        sa.Column("software_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("ui_type", sa.JSON(), nullable=True),
        sa.Column("ui_description", sa.Text(), nullable=True),
        sa.Column("platform_supported", sa.JSON(), nullable=True),
        sa.Column("typical_customers", sa.JSON(), nullable=True),
        sa.Column("content", sa.JSON(), nullable=True),
        sa.Column("logo", sa.String(1024), nullable=True),
        sa.Column("free_trial", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("free_version", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("user_id", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_Software_name", "Software", ["name"], unique=True)
    op.create_index("ix_Software_user_id", "Software", ["user_id"])

    op.create_table(
        "Feature",
        sa.Column("feature_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("software_id", sa.Integer(), sa.ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False),
        sa.Column("feature_name", sa.String(255), nullable=False),
        sa.Column("feature_description", sa.Text(), nullable=True),
    )
    op.create_index("ix_Feature_software_id", "Feature", ["software_id"])

    op.create_table(
        "PricingPlan",
        sa.Column("plan_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("software_id", sa.Integer(), sa.ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False),
        sa.Column("plan_name", sa.String(255), nullable=False),
        sa.Column("cost", sa.Float(), nullable=True),
        sa.Column("included_features", sa.Text(), nullable=True),
        sa.Column("payment_options", sa.JSON(), nullable=True),
    )
    op.create_index("ix_PricingPlan_software_id", "PricingPlan", ["software_id"])

    op.create_table(
        "SupportOption",
        sa.Column("support_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("software_id", sa.Integer(), sa.ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False),
        sa.Column("channels", sa.JSON(), nullable=True),
        sa.Column("hours", sa.JSON(), nullable=True),
        sa.Column("training_options", sa.JSON(), nullable=True),
        sa.Column("self_help_resources", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_SupportOption_software_id", "SupportOption", ["software_id"], unique=True)

    op.create_table(
        "Review",
        sa.Column("review_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("software_id", sa.Integer(), sa.ForeignKey("Software.software_id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(512), nullable=False),
        sa.Column("reviewer_name", sa.String(255), nullable=True),
        sa.Column("reviewer_email", sa.String(255), nullable=True),
        sa.Column("overall_rating", sa.Float(), nullable=False),
        sa.Column("pros", sa.Text(), nullable=False),
        sa.Column("cons", sa.Text(), nullable=False),
        sa.Column("experience_description", sa.Text(), nullable=True),
        sa.Column("category_ratings", sa.JSON(), nullable=True),
        sa.Column("pricing_perception", sa.Integer(), nullable=True),
        sa.Column("recommendation_score", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_Review_software_id", "Review", ["software_id"])
    op.create_index("ix_Review_created_at", "Review", ["created_at"])

    op.create_table(
        "ContactSubmission",
        sa.Column("submission_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("subject", sa.String(512), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "SoftwareInterest",
        sa.Column("interest_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("software_name", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("contact_number", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_SoftwareInterest_software_name", "SoftwareInterest", ["software_name"])


def downgrade() -> None:
    op.drop_index("ix_SoftwareInterest_software_name", table_name="SoftwareInterest")
    op.drop_table("SoftwareInterest")
    op.drop_table("ContactSubmission")
    op.drop_index("ix_Review_created_at", table_name="Review")
    op.drop_index("ix_Review_software_id", table_name="Review")
    op.drop_table("Review")
    op.drop_index("ix_SupportOption_software_id", table_name="SupportOption")
    op.drop_table("SupportOption")
    op.drop_index("ix_PricingPlan_software_id", table_name="PricingPlan")
    op.drop_table("PricingPlan")
    op.drop_index("ix_Feature_software_id", table_name="Feature")
    op.drop_table("Feature")
    op.drop_index("ix_Software_user_id", table_name="Software")
    op.drop_index("ix_Software_name", table_name="Software")
    op.drop_table("Software")
