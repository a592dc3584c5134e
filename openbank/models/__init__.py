"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with their
database's metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    client: 고객, 개인 정보, 계좌, 거래 (Client, Person, Account, AccountTransaction) — openbankdb
    system_property: 시스템 속성 (System properties) — securitydb
"""

from openbank.models.client import Client, Person, Account, AccountTransaction
from openbank.models.system_property import SystemProperty

__all__ = [
    "Client", "Person", "Account", "AccountTransaction",
    "SystemProperty",
]
