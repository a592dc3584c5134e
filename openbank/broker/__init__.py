"""내장 메시지 브로커 패키지.

Embedded message broker package. ``broker`` is the application-wide
instance wired up in ``openbank.main``.
"""

from openbank.broker.embedded import (
    BrokerError,
    BrokerNotRunningError,
    EmbeddedBroker,
    UnknownQueueError,
)

# 애플리케이션 브로커 싱글턴 — Application broker singleton
broker: EmbeddedBroker = EmbeddedBroker("embedded")

__all__ = [
    "BrokerError", "BrokerNotRunningError", "EmbeddedBroker", "UnknownQueueError",
    "broker",
]
