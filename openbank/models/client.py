"""고객 관련 SQLAlchemy ORM 모델 정의.

Client-related SQLAlchemy ORM model definitions (openbankdb).
Includes Client, Person, Account and AccountTransaction entities
with cascade delete relationships.

Tables:
    - clients: 고객 및 고객 유형 (Client with its client type attributes)
    - persons: 고객 개인 정보, 고객당 1건 (Person details, one per client)
    - accounts: 계좌 (Accounts owned by a client)
    - account_transactions: 계좌 거래 내역 (Account transactions)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from openbank.database import Base


class Client(Base):
    """고객 모델 — 개인 정보, 계좌, 고객 유형을 묶는 최상위 엔티티.

    Client model — Top-level entity owning a person, accounts and a client type.
    The client type (REGULAR / PREMIUM / CORPORATE) is stored on the row itself.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        type: 고객 유형 (Client type: REGULAR, PREMIUM, CORPORATE)
        rating: 고객 등급 (Client rating)
        special_offers: 특별 혜택 설명 (Special offers, optional)
        premium_rating: 프리미엄 등급, PREMIUM 전용 (Premium rating, PREMIUM only)

    Relationships:
        person: 개인 정보 (Person details, cascade delete)
        accounts: 계좌 목록 (Accounts, cascade delete)
    """

    __tablename__ = "clients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 고객 유형 — REGULAR / PREMIUM / CORPORATE
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="REGULAR")
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    special_offers: Mapped[str | None] = mapped_column(Text, nullable=True)
    premium_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships (cascade: 고객 삭제 시 하위 데이터 일괄 삭제)
    person = relationship("Person", back_populates="client", uselist=False, cascade="all, delete-orphan")
    accounts = relationship("Account", back_populates="client", cascade="all, delete-orphan", order_by="Account.created_at")


class Person(Base):
    """개인 정보 모델 — 주민번호(personnummer)로 고객을 식별.

    Person model — Identifies a client by its unique 12-digit
    person identification number.
    """

    __tablename__ = "persons"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    client_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("clients.id", ondelete="CASCADE"), unique=True, nullable=False)
    # 개인 식별 번호 — YYYYMMDDNNNN
    person_identification: Mapped[str] = mapped_column(String(12), unique=True, index=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mail: Mapped[str] = mapped_column(String(255), nullable=False)

    client = relationship("Client", back_populates="person")


class Account(Base):
    """계좌 모델 — 고객 소유 계좌와 잔액.

    Account model — An account owned by a client, with its balance.
    """

    __tablename__ = "accounts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    client_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    client = relationship("Client", back_populates="accounts")
    transactions = relationship(
        "AccountTransaction",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="AccountTransaction.created_at",
    )


class AccountTransaction(Base):
    """계좌 거래 모델 — 입금/출금 기록.

    Account transaction model — A DEPOSIT or WITHDRAWAL record.
    """

    __tablename__ = "account_transactions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    account_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)
    # 거래 유형 — DEPOSIT / WITHDRAWAL
    transaction_type: Mapped[str] = mapped_column(String(20), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    account = relationship("Account", back_populates="transactions")
