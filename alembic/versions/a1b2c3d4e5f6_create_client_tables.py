"""create_client_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

고객 테이블 생성: clients, persons, accounts, account_transactions.
Create client tables: clients, persons, accounts, account_transactions.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # clients — 고객 및 고객 유형 (Client with its client type attributes)
    op.create_table(
        'clients',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('type', sa.String(20), nullable=False, server_default='REGULAR'),
        sa.Column('rating', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('special_offers', sa.Text(), nullable=True),
        sa.Column('premium_rating', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # persons — 고객당 1건 (One person per client)
    op.create_table(
        'persons',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('client_id', sa.Uuid(), sa.ForeignKey('clients.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('person_identification', sa.String(12), nullable=False),
        sa.Column('first_name', sa.String(255), nullable=False),
        sa.Column('last_name', sa.String(255), nullable=False),
        sa.Column('mail', sa.String(255), nullable=False),
    )
    op.create_index('ix_persons_person_identification', 'persons', ['person_identification'], unique=True)

    # accounts — 계좌 (Accounts owned by a client)
    op.create_table(
        'accounts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('client_id', sa.Uuid(), sa.ForeignKey('clients.id', ondelete='CASCADE'), nullable=False),
        sa.Column('balance', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_accounts_client', 'accounts', ['client_id'])

    # account_transactions — 입금/출금 기록 (Deposits and withdrawals)
    op.create_table(
        'account_transactions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('account_id', sa.Uuid(), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('transaction_type', sa.String(20), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_account_transactions_account', 'account_transactions', ['account_id'])


def downgrade() -> None:
    op.drop_index('ix_account_transactions_account', table_name='account_transactions')
    op.drop_table('account_transactions')
    op.drop_index('ix_accounts_client', table_name='accounts')
    op.drop_table('accounts')
    op.drop_index('ix_persons_person_identification', table_name='persons')
    op.drop_table('persons')
    op.drop_table('clients')
