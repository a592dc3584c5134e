"""고객 레포지토리 — 고객 조회 및 생성 쿼리.

Client Repository — Lookup and creation queries for clients.
Extends BaseRepository with person-identification lookups that eagerly
load the person, accounts and account transactions.
"""

from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from openbank.models.client import Account, AccountTransaction, Client, Person
from openbank.repositories.base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    """고객 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the clients table and the
    tables it owns (persons, accounts, account_transactions).
    """

    def __init__(self) -> None:
        super().__init__(Client)

    async def get_by_person_identification(
        self,
        db: AsyncSession,
        person_identification: str,
    ) -> Client | None:
        """개인 식별 번호로 고객을 조회합니다 (개인 정보/계좌/거래 포함).

        Retrieve a client by person identification number with person,
        accounts and transactions eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_identification: 12자리 개인 식별 번호 (12-digit person identification)

        Returns:
            Client | None: 고객 또는 None (Client with details loaded, or None)
        """
        query: Select = (
            select(Client)
            .join(Client.person)
            .options(
                selectinload(Client.person),
                selectinload(Client.accounts).selectinload(Account.transactions),
            )
            .where(Person.person_identification == person_identification)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create_with_details(
        self,
        db: AsyncSession,
        client_data: dict[str, Any],
        person_data: dict[str, Any],
        accounts_data: list[dict[str, Any]] | None = None,
    ) -> Client:
        """고객을 개인 정보 및 계좌와 함께 생성합니다.

        Create a client together with its person and accounts.
        Each account dict may carry a ``transactions`` list of
        ``{"transaction_type", "message"}`` dicts.

        Returns:
            Client: 상세 정보가 로드된 고객 (Created client with details loaded)
        """
        client: Client = Client(**client_data)
        client.person = Person(**person_data)

        for account_data in accounts_data or []:
            account_fields: dict[str, Any] = dict(account_data)
            transactions: list[dict[str, Any]] = account_fields.pop("transactions", [])
            account: Account = Account(**account_fields)
            account.transactions = [AccountTransaction(**t) for t in transactions]
            client.accounts.append(account)

        db.add(client)
        await db.flush()

        # 관계를 다시 로드하여 비동기 lazy load 방지 (Reload relationships to avoid async lazy loads)
        loaded: Client | None = await self.get_by_person_identification(
            db, person_data["person_identification"]
        )
        assert loaded is not None
        return loaded


# 싱글턴 인스턴스 — Singleton instance
client_repository: ClientRepository = ClientRepository()
