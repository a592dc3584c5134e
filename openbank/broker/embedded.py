"""내장 메시지 브로커 — 프로세스 내부 비동기 큐.

Embedded message broker — In-process, non-persistent queues for
asynchronous hand-off inside the same deployable unit.

Producers call ``send()``; listeners registered with ``add_listener()``
are driven by a listener container (one asyncio task per listener) that
runs between ``start()`` and ``stop()``. Messages still queued at
``stop()`` are dropped.

Usage:
    broker.declare_queue("IN_QUEUE")
    broker.add_listener("IN_QUEUE", handle_message)
    await broker.start()
    await broker.send("IN_QUEUE", {"job_id": "..."})
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

Message = dict[str, Any]
MessageListener = Callable[[Message], Awaitable[None]]


class BrokerError(Exception):
    """브로커 오류의 기본 클래스 (Base class for broker errors)."""


class BrokerNotRunningError(BrokerError):
    """브로커가 시작되지 않았을 때 (Broker has not been started)."""


class UnknownQueueError(BrokerError):
    """선언되지 않은 큐 (Queue was never declared)."""


class EmbeddedBroker:
    """프로세스 내부 메시지 브로커.

    In-process message broker with named queues and a listener container.

    Attributes:
        name: 브로커 이름 (Broker name, used in log lines)
    """

    def __init__(self, name: str = "embedded") -> None:
        self.name: str = name
        self._destinations: list[str] = []
        self._listeners: dict[str, list[MessageListener]] = {}
        self._queues: dict[str, asyncio.Queue[Message]] = {}
        self._tasks: list[asyncio.Task[None]] = []

    @property
    def running(self) -> bool:
        return bool(self._queues)

    def declare_queue(self, queue_name: str) -> None:
        """큐를 선언합니다 (Declare a queue; repeated declarations are ignored)."""
        if queue_name not in self._destinations:
            self._destinations.append(queue_name)
            self._listeners.setdefault(queue_name, [])

    def add_listener(self, queue_name: str, listener: MessageListener) -> None:
        """큐에 리스너를 등록합니다.

        Register a listener on a declared queue. Registering the same
        listener twice has no effect. Listeners added while running are
        picked up on the next ``start()``.

        Raises:
            UnknownQueueError: 선언되지 않은 큐 (Queue not declared)
        """
        if queue_name not in self._listeners:
            raise UnknownQueueError(f"Queue {queue_name!r} is not declared on broker {self.name!r}")
        if listener not in self._listeners[queue_name]:
            self._listeners[queue_name].append(listener)

    async def start(self) -> None:
        """큐를 생성하고 리스너 컨테이너를 시작합니다.

        Create fresh queues on the running event loop and start one consumer
        task per registered listener. Listeners on the same queue compete
        for its messages.
        """
        if self.running:
            return

        self._queues = {name: asyncio.Queue() for name in self._destinations}
        for queue_name, listeners in self._listeners.items():
            for listener in listeners:
                task = asyncio.create_task(
                    self._consume(queue_name, listener),
                    name=f"{self.name}:{queue_name}:{getattr(listener, '__name__', 'listener')}",
                )
                self._tasks.append(task)

        logger.info("Broker %s started with queues %s", self.name, self._destinations)

    async def stop(self) -> None:
        """리스너 컨테이너를 중지하고 남은 메시지를 버립니다.

        Cancel the consumer tasks and drop every queued message. A listener
        interrupted mid-message receives ``asyncio.CancelledError``.
        """
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)

        dropped: int = sum(q.qsize() for q in self._queues.values())
        self._tasks = []
        self._queues = {}
        logger.info("Broker %s stopped, %d queued message(s) dropped", self.name, dropped)

    async def send(self, queue_name: str, message: Message) -> None:
        """메시지를 큐에 넣습니다.

        Put a message on a queue.

        Raises:
            BrokerNotRunningError: 브로커가 중지 상태 (Broker not started)
            UnknownQueueError: 선언되지 않은 큐 (Queue not declared)
        """
        if not self.running:
            raise BrokerNotRunningError(f"Broker {self.name!r} is not running")
        queue = self._queues.get(queue_name)
        if queue is None:
            raise UnknownQueueError(f"Queue {queue_name!r} is not declared on broker {self.name!r}")

        await queue.put(message)
        logger.debug("Message sent to %s: %s", queue_name, message)

    async def join(self, queue_name: str) -> None:
        """큐의 모든 메시지가 처리될 때까지 대기합니다.

        Wait until every message put on the queue has been processed.
        Nothing consumes a queue without listeners, so waiting on a non-empty
        one never returns; bound it with ``asyncio.wait_for`` when needed.

        Raises:
            UnknownQueueError: 브로커가 중지 상태이거나 선언되지 않은 큐
                (Broker stopped or queue not declared)
        """
        queue = self._queues.get(queue_name)
        if queue is None:
            raise UnknownQueueError(f"Queue {queue_name!r} is not declared on broker {self.name!r}")
        await queue.join()

    async def _consume(self, queue_name: str, listener: MessageListener) -> None:
        queue = self._queues[queue_name]
        while True:
            message: Message = await queue.get()
            try:
                await listener(message)
            except Exception:
                # 리스너 실패가 컨테이너를 멈추지 않도록 — Listener failures never stop the container
                logger.exception("Listener on %s failed for message %s", queue_name, message)
            finally:
                queue.task_done()
