"""create shelter tables

Revision ID: 5a1c0e7d2b93
Revises:
Create Date: 2026-10-17 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '5a1c0e7d2b93'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLAlchemy stores enum member names
role_enum = sa.Enum('PUBLIC', 'CLINIC_STAFF', 'SUPER_ADMIN', name='role')
cat_status_enum = sa.Enum('AVAILABLE', 'BOOKED', 'ADOPTED', 'DECEASED', name='catstatus')
age_group_enum = sa.Enum('KITTEN', 'ADULT', 'SENIOR', name='agegroup')
gender_enum = sa.Enum('MALE', 'FEMALE', name='gender')
entry_type_enum = sa.Enum('RESCUE', 'SURRENDER', 'STRAY', name='entrytype')
adoption_status_enum = sa.Enum(
    'PENDING', 'APPROVED', 'COMPLETED', 'CANCELLED', name='adoptionstatus'
)
procedure_type_enum = sa.Enum(
    'NEUTERED', 'SPAYED', 'VACCINATED', 'DEWORMED', name='proceduretype'
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('username', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('phone', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('role', role_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)
    op.create_index(op.f('ix_user_role'), 'user', ['role'], unique=False)

    op.create_table(
        'cat',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('age_group', age_group_enum, nullable=False),
        sa.Column('gender', gender_enum, nullable=False),
        sa.Column('breed', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('color', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('status', cat_status_enum, nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('image_url', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column('entry_date', sa.DateTime(), nullable=False),
        sa.Column('entry_type', entry_type_enum, nullable=False),
        sa.Column('is_neutered_or_spayed', sa.Boolean(), nullable=False),
        sa.Column('medical_notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_cat_age_group'), 'cat', ['age_group'], unique=False)
    op.create_index(op.f('ix_cat_status'), 'cat', ['status'], unique=False)
    op.create_index(op.f('ix_cat_entry_date'), 'cat', ['entry_date'], unique=False)
    op.create_index(op.f('ix_cat_entry_type'), 'cat', ['entry_type'], unique=False)

    op.create_table(
        'adoption',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('cat_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('adopted_with', sa.Integer(), nullable=True),
        sa.Column('status', adoption_status_enum, nullable=False),
        sa.Column('adoption_date', sa.DateTime(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['cat_id'], ['cat.id']),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.ForeignKeyConstraint(['adopted_with'], ['cat.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_adoption_cat_id'), 'adoption', ['cat_id'], unique=False)
    op.create_index(op.f('ix_adoption_user_id'), 'adoption', ['user_id'], unique=False)
    op.create_index(op.f('ix_adoption_status'), 'adoption', ['status'], unique=False)
    op.create_index(op.f('ix_adoption_adoption_date'), 'adoption', ['adoption_date'], unique=False)

    op.create_table(
        'medical_procedure',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('cat_id', sa.Integer(), nullable=False),
        sa.Column('procedure_type', procedure_type_enum, nullable=False),
        sa.Column('procedure_date', sa.DateTime(), nullable=False),
        sa.Column('veterinarian', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('cost', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['cat_id'], ['cat.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_medical_procedure_cat_id'), 'medical_procedure', ['cat_id'], unique=False)
    op.create_index(op.f('ix_medical_procedure_procedure_type'), 'medical_procedure', ['procedure_type'], unique=False)
    op.create_index(op.f('ix_medical_procedure_procedure_date'), 'medical_procedure', ['procedure_date'], unique=False)

    op.create_table(
        'donation',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('donor_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('donor_email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('currency', sqlmodel.sql.sqltypes.AutoString(length=3), nullable=False),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'fundraising_campaign',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('target_amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('currency', sqlmodel.sql.sqltypes.AutoString(length=3), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('current_amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_fundraising_campaign_currency'), 'fundraising_campaign', ['currency'], unique=False)
    op.create_index(op.f('ix_fundraising_campaign_is_active'), 'fundraising_campaign', ['is_active'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('fundraising_campaign')
    op.drop_table('donation')
    op.drop_table('medical_procedure')
    op.drop_table('adoption')
    op.drop_table('cat')
    op.drop_table('user')
    bind = op.get_bind()
    for enum in (
        procedure_type_enum,
        adoption_status_enum,
        entry_type_enum,
        gender_enum,
        age_group_enum,
        cat_status_enum,
        role_enum,
    ):
        enum.drop(bind, checkfirst=True)
