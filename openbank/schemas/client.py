"""고객 Pydantic 요청/응답 스키마 정의.

Client Pydantic request/response schema definitions.
Field constraints carry the business validation rules for client payloads:
person identification format, client type consistency and account content.
"""

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, model_validator

from openbank.utils.validators import is_valid_person_identification

# 간단한 이메일 형식 — Minimal e-mail shape (local@domain.tld)
_MAIL_PATTERN: str = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class TransactionType(str, Enum):
    """거래 유형 (Account transaction type)."""

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class ClientTypeName(str, Enum):
    """고객 유형 (Client type)."""

    REGULAR = "REGULAR"
    PREMIUM = "PREMIUM"
    CORPORATE = "CORPORATE"


def _check_person_identification(value: str) -> str:
    if not is_valid_person_identification(value):
        raise ValueError("invalid person identification number")
    return value


PersonIdentification = Annotated[str, AfterValidator(_check_person_identification)]


class PersonApi(BaseModel):
    """개인 정보 스키마.

    Person details of a client.

    Attributes:
        person_identification: 12자리 개인 식별 번호 (12-digit person identification number)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        mail: 이메일 (E-mail address)
    """

    person_identification: PersonIdentification
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    mail: str = Field(pattern=_MAIL_PATTERN, max_length=255)



class AccountTransactionApi(BaseModel):
    """계좌 거래 스키마 (Account transaction)."""

    transaction_type: TransactionType
    message: str = Field(min_length=1)


class AccountApi(BaseModel):
    """계좌 스키마 (Account with its transactions)."""

    balance: int = Field(ge=0)
    account_transaction_list: list[AccountTransactionApi] = []


class ClientTypeApi(BaseModel):
    """고객 유형 스키마.

    Client type with its rating attributes.
    ``premium_rating`` is required for PREMIUM clients and rejected otherwise.
    """

    type: ClientTypeName
    rating: int = Field(ge=0)
    special_offers: str | None = None
    premium_rating: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def premium_rating_matches_type(self) -> "ClientTypeApi":
        if self.type == ClientTypeName.PREMIUM and self.premium_rating is None:
            raise ValueError("premium_rating is required for PREMIUM clients")
        if self.type != ClientTypeName.PREMIUM and self.premium_rating is not None:
            raise ValueError("premium_rating is only allowed for PREMIUM clients")
        return self


class ClientApi(BaseModel):
    """고객 스키마 — 조회 응답 및 수정 요청의 본문.

    Client schema used both as lookup response and update payload.
    """

    person: PersonApi
    account_list: list[AccountApi] = []
    client_type: ClientTypeApi


class ClientRequest(BaseModel):
    """요청 본문 기반 고객 조회 스키마 (Client lookup by request body)."""

    person_identification: PersonIdentification



class ClientInformationRequest(BaseModel):
    """고객 정보 수정 요청 스키마 (Client information update request)."""

    client: ClientApi


class ClientInformationResponse(BaseModel):
    """고객 정보 수정 응답 스키마 (Client information update response)."""

    message: str
    client: ClientApi
