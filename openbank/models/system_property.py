"""시스템 속성 ORM 모델 (securitydb).

System property ORM model stored in securitydb.
Holds named runtime properties such as the remote world API location.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from openbank.database import SecurityBase


class SystemProperty(SecurityBase):
    """시스템 속성 모델 — 이름/값 쌍.

    System property model — A unique name mapped to a text value.
    """

    __tablename__ = "system_properties"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
