"""initial_studio_schema

Revision ID: 20261018_01
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '20261018_01'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_blocked', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('role', sa.String(length=32), nullable=False, server_default='client'),
        sa.Column('photographer_status', sa.String(length=32), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('photographer_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('client_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('contact_number', sa.String(), nullable=False),
        sa.Column('service_type', sa.String(), nullable=False),
        sa.Column('package_type', sa.String(), nullable=False),
        sa.Column('has_photo_package', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('has_video_package', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('video_package_type', sa.String(), nullable=True),
        sa.Column('number_of_people', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('event_hours', sa.Integer(), nullable=True),
        sa.Column('addons', sa.JSON(), nullable=False),
        sa.Column('shoot_date', sa.String(), nullable=False),
        sa.Column('shoot_time', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('parish', sa.String(), nullable=False),
        sa.Column('base_price', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('video_price', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('extra_person_fee', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('addons_total', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('transportation_fee', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_price', sa.Integer(), nullable=False),
        sa.Column('deposit_amount', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('balance_due', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('currency', sa.String(length=3), nullable=False, server_default='USD'),
        sa.Column('deposit_paid', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('balance_paid', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('deposit_checkout_id', sa.String(), nullable=True),
        sa.Column('balance_checkout_id', sa.String(), nullable=True),
        sa.Column('deposit_order_id', sa.String(), nullable=True),
        sa.Column('balance_order_id', sa.String(), nullable=True),
        sa.Column('referral_source', sa.JSON(), nullable=False),
        sa.Column('client_initials', sa.String(length=5), nullable=False),
        sa.Column('contract_accepted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='pending'),
        *_timestamps(),
    )
    op.create_index('ix_bookings_id', 'bookings', ['id'])
    op.create_index('ix_bookings_email', 'bookings', ['email'])
    op.create_index('ix_bookings_photographer_id', 'bookings', ['photographer_id'])

    op.create_table(
        'galleries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('booking_id', sa.Integer(), sa.ForeignKey('bookings.id', ondelete='SET NULL'), nullable=True, unique=True),
        sa.Column('client_email', sa.String(), nullable=False),
        sa.Column('access_code', sa.String(length=16), nullable=False),
        sa.Column('gallery_images', sa.JSON(), nullable=False),
        sa.Column('selected_images', sa.JSON(), nullable=False),
        sa.Column('final_images', sa.JSON(), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='pending'),
        sa.Column('gallery_download_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('selected_download_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('final_download_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_galleries_id', 'galleries', ['id'])
    op.create_index('ix_galleries_client_email', 'galleries', ['client_email'])
    op.create_index('ix_galleries_access_code', 'galleries', ['access_code'])

    op.create_table(
        'catalogues',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('booking_id', sa.Integer(), sa.ForeignKey('bookings.id', ondelete='SET NULL'), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('service_type', sa.String(), nullable=False),
        sa.Column('cover_image', sa.String(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('published_at', sa.DateTime(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_catalogues_id', 'catalogues', ['id'])
    op.create_index('ix_catalogues_service_type', 'catalogues', ['service_type'])

    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('catalogue_id', sa.Integer(), sa.ForeignKey('catalogues.id', ondelete='CASCADE'), nullable=True),
        sa.Column('client_name', sa.String(), nullable=False),
        sa.Column('client_email', sa.String(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('review_text', sa.Text(), nullable=False),
        sa.Column('review_type', sa.String(length=32), nullable=False, server_default='general'),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('ix_reviews_id', 'reviews', ['id'])
    op.create_index('ix_reviews_catalogue_id', 'reviews', ['catalogue_id'])
    op.create_index('ix_reviews_client_email', 'reviews', ['client_email'])

    op.create_table(
        'contact_messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='unread'),
        *_timestamps(),
    )
    op.create_index('ix_contact_messages_id', 'contact_messages', ['id'])

    for table in ('pricing_configs', 'site_configs'):
        op.create_table(
            table,
            sa.Column('key', sa.String(), primary_key=True),
            sa.Column('config', sa.JSON(), nullable=False),
            *_timestamps(),
        )


def downgrade() -> None:
    op.drop_table('site_configs')
    op.drop_table('pricing_configs')
    op.drop_table('contact_messages')
    op.drop_table('reviews')
    op.drop_table('catalogues')
    op.drop_table('galleries')
    op.drop_table('bookings')
    op.drop_table('users')
