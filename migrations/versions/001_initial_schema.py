"""Create marketplace schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create accounts, catalog, client and lawyer tables"""

    # 1. accounts (rows provisioned by the auth provider)
    op.create_table('accounts',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(254), nullable=False),
        sa.Column('email_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='client'),
        sa.Column('banned', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('ban_reason', sa.Text(), nullable=True),
        sa.Column('ban_expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('onboarding_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_accounts'),
        sa.CheckConstraint("role IN ('admin', 'lawyer', 'client')", name='ck_accounts_role_valid'),
    )
    op.create_index('ix_accounts_email', 'accounts', ['email'], unique=True)
    op.create_index('ix_accounts_role', 'accounts', ['role'])
    op.create_index('ix_accounts_banned', 'accounts', ['banned'])

    # 2. specializations catalog
    op.create_table('specializations',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_specializations'),
        sa.UniqueConstraint('name', name='uq_specializations_name'),
    )

    # 3. client profiles (1:1 with accounts)
    op.create_table('client_profiles',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('account_id', sa.String(36), nullable=False),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('phone_number', sa.String(32), nullable=True),
        sa.Column('country', sa.String(100), nullable=False),
        sa.Column('state', sa.String(100), nullable=False),
        sa.Column('company', sa.String(255), nullable=True),
        sa.Column('onboarding_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_client_profiles'),
        sa.UniqueConstraint('account_id', name='uq_client_profiles_account_id'),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ondelete='CASCADE',
                                name='fk_client_profiles_account_id_accounts'),
    )

    op.create_table('client_specializations',
        sa.Column('client_id', sa.String(36), nullable=False),
        sa.Column('specialization_id', sa.String(36), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('client_id', 'specialization_id', name='pk_client_specializations'),
        sa.ForeignKeyConstraint(['client_id'], ['client_profiles.id'], ondelete='CASCADE',
                                name='fk_client_specializations_client_id_client_profiles'),
        sa.ForeignKeyConstraint(['specialization_id'], ['specializations.id'], ondelete='RESTRICT',
                                name='fk_client_specializations_specialization_id_specializations'),
    )

    # 4. lawyer profiles (1:1 with accounts) and child tables
    op.create_table('lawyer_profiles',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('account_id', sa.String(36), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('middle_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(254), nullable=False),
        sa.Column('phone_number', sa.String(32), nullable=False),
        sa.Column('country', sa.String(100), nullable=False),
        sa.Column('bar_number', sa.String(64), nullable=True),
        sa.Column('bar_association', sa.String(255), nullable=True),
        sa.Column('bar_issue_date', sa.Date(), nullable=True),
        sa.Column('bar_expiry_date', sa.Date(), nullable=True),
        sa.Column('law_school', sa.String(255), nullable=True),
        sa.Column('graduation_year', sa.Integer(), nullable=True),
        sa.Column('current_firm', sa.String(255), nullable=True),
        sa.Column('onboarding_step', sa.String(32), nullable=False, server_default='basic_info'),
        sa.Column('application_status', sa.String(32), nullable=False, server_default='pending'),
        sa.Column('profile_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_lawyer_profiles'),
        sa.UniqueConstraint('account_id', name='uq_lawyer_profiles_account_id'),
        sa.UniqueConstraint('bar_number', name='uq_lawyer_profiles_bar_number'),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ondelete='CASCADE',
                                name='fk_lawyer_profiles_account_id_accounts'),
        sa.CheckConstraint(
            "onboarding_step IN ('basic_info', 'credentials', 'specializations', 'submitted')",
            name='ck_lawyer_profiles_onboarding_step_valid',
        ),
        sa.CheckConstraint(
            "application_status IN ('pending', 'approved', 'rejected', 'revision')",
            name='ck_lawyer_profiles_application_status_valid',
        ),
    )
    op.create_index('ix_lawyer_profiles_email', 'lawyer_profiles', ['email'])
    op.create_index('ix_lawyer_profiles_onboarding_step', 'lawyer_profiles', ['onboarding_step'])
    op.create_index('ix_lawyer_profiles_application_status', 'lawyer_profiles', ['application_status'])

    op.create_table('lawyer_documents',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('lawyer_id', sa.String(36), nullable=False),
        sa.Column('document_type', sa.String(32), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('public_id', sa.String(255), nullable=False),
        sa.Column('original_name', sa.String(255), nullable=True),
        sa.Column('file_size', sa.Integer(), nullable=True),
        sa.Column('mime_type', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_lawyer_documents'),
        sa.ForeignKeyConstraint(['lawyer_id'], ['lawyer_profiles.id'], ondelete='CASCADE',
                                name='fk_lawyer_documents_lawyer_id_lawyer_profiles'),
        sa.CheckConstraint(
            "document_type IN ('bar_certificate', 'law_degree', 'professional_id', 'other')",
            name='ck_lawyer_documents_document_type_valid',
        ),
    )
    op.create_index('ix_lawyer_documents_lawyer_id', 'lawyer_documents', ['lawyer_id'])

    op.create_table('lawyer_specializations',
        sa.Column('lawyer_id', sa.String(36), nullable=False),
        sa.Column('specialization_id', sa.String(36), nullable=False),
        sa.Column('kind', sa.String(16), nullable=False),
        sa.Column('years_of_experience', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('lawyer_id', 'specialization_id', name='pk_lawyer_specializations'),
        sa.ForeignKeyConstraint(['lawyer_id'], ['lawyer_profiles.id'], ondelete='CASCADE',
                                name='fk_lawyer_specializations_lawyer_id_lawyer_profiles'),
        sa.ForeignKeyConstraint(['specialization_id'], ['specializations.id'], ondelete='RESTRICT',
                                name='fk_lawyer_specializations_specialization_id_specializations'),
        sa.CheckConstraint("kind IN ('primary', 'secondary')", name='ck_lawyer_specializations_kind_valid'),
        sa.CheckConstraint('years_of_experience >= 0', name='ck_lawyer_specializations_years_non_negative'),
    )

    op.create_table('lawyer_languages',
        sa.Column('lawyer_id', sa.String(36), nullable=False),
        sa.Column('language_id', sa.String(64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('lawyer_id', 'language_id', name='pk_lawyer_languages'),
        sa.ForeignKeyConstraint(['lawyer_id'], ['lawyer_profiles.id'], ondelete='CASCADE',
                                name='fk_lawyer_languages_lawyer_id_lawyer_profiles'),
    )


def downgrade() -> None:
    """Drop marketplace tables"""
    op.drop_table('lawyer_languages')
    op.drop_table('lawyer_specializations')
    op.drop_table('lawyer_documents')
    op.drop_table('lawyer_profiles')
    op.drop_table('client_specializations')
    op.drop_table('client_profiles')
    op.drop_table('specializations')
    op.drop_table('accounts')
