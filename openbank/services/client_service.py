"""고객 서비스 — 고객 조회 및 정보 수정 비즈니스 로직.

Client Service — Business logic for client lookup and client information
update. Converts ORM entities to the ClientApi wire model.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from openbank.models.client import Client
from openbank.repositories.client_repository import client_repository
from openbank.schemas.client import (
    AccountApi,
    AccountTransactionApi,
    ClientApi,
    ClientInformationRequest,
    ClientInformationResponse,
    ClientTypeApi,
    PersonApi,
)
from openbank.utils.exceptions import (
    CLIENT_NOT_FOUND,
    INVALID_PERSON_IDENTIFICATION,
    BadRequestError,
    NotFoundError,
)
from openbank.utils.validators import is_valid_person_identification

logger = logging.getLogger(__name__)

CLIENT_UPDATED: str = "Client information updated successfully."


class ClientService:
    """고객 관련 비즈니스 로직을 처리하는 서비스.

    Service handling client business logic.
    """

    def to_api(self, client: Client) -> ClientApi:
        """고객 모델을 ClientApi 스키마로 변환합니다.

        Convert a Client with loaded relationships to a ClientApi schema.

        Args:
            client: 고객 모델 (Client model instance)

        Returns:
            ClientApi: 고객 응답 (Client response)
        """
        person = client.person
        return ClientApi(
            person=PersonApi(
                person_identification=person.person_identification,
                first_name=person.first_name,
                last_name=person.last_name,
                mail=person.mail,
            ),
            account_list=[
                AccountApi(
                    balance=account.balance,
                    account_transaction_list=[
                        AccountTransactionApi(transaction_type=t.transaction_type, message=t.message)
                        for t in account.transactions
                    ],
                )
                for account in client.accounts
            ],
            client_type=ClientTypeApi(
                type=client.type,
                rating=client.rating,
                special_offers=client.special_offers,
                premium_rating=client.premium_rating,
            ),
        )

    async def get_client(
        self,
        db: AsyncSession,
        person_identification: str,
    ) -> ClientApi:
        """개인 식별 번호로 고객을 조회합니다.

        Retrieve a client by person identification number.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_identification: 12자리 개인 식별 번호 (12-digit person identification)

        Returns:
            ClientApi: 고객 정보 (Client information)

        Raises:
            BadRequestError: 식별 번호 형식 오류 (Malformed person identification)
            NotFoundError: 고객을 찾을 수 없을 때 (Client not found)
        """
        if not is_valid_person_identification(person_identification):
            raise BadRequestError(INVALID_PERSON_IDENTIFICATION)

        client: Client | None = await client_repository.get_by_person_identification(
            db, person_identification
        )
        if client is None:
            raise NotFoundError(CLIENT_NOT_FOUND)

        return self.to_api(client)

    async def update_client_information(
        self,
        db: AsyncSession,
        data: ClientInformationRequest,
    ) -> ClientInformationResponse:
        """고객 정보를 수정합니다.

        Update the person details and client type of the client identified
        by ``client.person.person_identification``. Accounts and their
        transactions are left untouched.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 수정 요청 (Update request)

        Returns:
            ClientInformationResponse: 수정된 고객 정보 (Updated client information)

        Raises:
            NotFoundError: 고객을 찾을 수 없을 때 (Client not found)
        """
        payload: ClientApi = data.client
        client: Client | None = await client_repository.get_by_person_identification(
            db, payload.person.person_identification
        )
        if client is None:
            raise NotFoundError(CLIENT_NOT_FOUND)

        await client_repository.update(
            db,
            client.person,
            payload.person.model_dump(include={"first_name", "last_name", "mail"}),
        )
        await client_repository.update(
            db,
            client,
            {
                "type": payload.client_type.type.value,
                "rating": payload.client_type.rating,
                "special_offers": payload.client_type.special_offers,
                "premium_rating": payload.client_type.premium_rating,
            },
        )
        logger.info("Updated client information for client %s", client.id)

        return ClientInformationResponse(message=CLIENT_UPDATED, client=self.to_api(client))


# 싱글턴 인스턴스 — Singleton instance
client_service: ClientService = ClientService()
