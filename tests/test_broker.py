"""내장 브로커 테스트.

Embedded broker tests — Queue declaration, listener container lifecycle,
delivery and error handling.
"""

import asyncio

import pytest

from openbank.broker import BrokerNotRunningError, EmbeddedBroker, UnknownQueueError


@pytest.fixture
def queue_broker() -> EmbeddedBroker:
    broker = EmbeddedBroker("test")
    broker.declare_queue("IN_QUEUE")
    return broker


class TestBrokerLifecycle:
    """시작/중지 테스트."""

    async def test_not_running_before_start(self, queue_broker: EmbeddedBroker):
        """시작 전에는 running=False, 전송 불가."""
        assert queue_broker.running is False
        with pytest.raises(BrokerNotRunningError):
            await queue_broker.send("IN_QUEUE", {"n": 1})

    async def test_start_stop(self, queue_broker: EmbeddedBroker):
        """시작 후 running=True, 중지 후 False."""
        await queue_broker.start()
        assert queue_broker.running is True
        await queue_broker.stop()
        assert queue_broker.running is False

    async def test_start_twice_is_noop(self, queue_broker: EmbeddedBroker):
        """중복 시작은 리스너를 중복 생성하지 않음."""
        received: list[dict] = []

        async def listener(message: dict) -> None:
            received.append(message)

        queue_broker.add_listener("IN_QUEUE", listener)
        await queue_broker.start()
        await queue_broker.start()
        try:
            await queue_broker.send("IN_QUEUE", {"n": 1})
            await queue_broker.join("IN_QUEUE")
        finally:
            await queue_broker.stop()
        assert received == [{"n": 1}]

    async def test_restart(self, queue_broker: EmbeddedBroker):
        """중지 후 재시작 시 다시 전달."""
        received: list[dict] = []

        async def listener(message: dict) -> None:
            received.append(message)

        queue_broker.add_listener("IN_QUEUE", listener)
        await queue_broker.start()
        await queue_broker.stop()
        await queue_broker.start()
        try:
            await queue_broker.send("IN_QUEUE", {"n": 2})
            await queue_broker.join("IN_QUEUE")
        finally:
            await queue_broker.stop()
        assert received == [{"n": 2}]


class TestBrokerDelivery:
    """메시지 전달 테스트."""

    async def test_delivers_in_order(self, queue_broker: EmbeddedBroker):
        """단일 리스너는 전송 순서대로 수신."""
        received: list[int] = []

        async def listener(message: dict) -> None:
            received.append(message["n"])

        queue_broker.add_listener("IN_QUEUE", listener)
        await queue_broker.start()
        try:
            for n in range(5):
                await queue_broker.send("IN_QUEUE", {"n": n})
            await queue_broker.join("IN_QUEUE")
        finally:
            await queue_broker.stop()
        assert received == [0, 1, 2, 3, 4]

    async def test_listener_failure_keeps_consuming(self, queue_broker: EmbeddedBroker):
        """리스너 예외 후에도 다음 메시지 처리."""
        received: list[int] = []

        async def listener(message: dict) -> None:
            if message["n"] == 0:
                raise RuntimeError("boom")
            received.append(message["n"])

        queue_broker.add_listener("IN_QUEUE", listener)
        await queue_broker.start()
        try:
            await queue_broker.send("IN_QUEUE", {"n": 0})
            await queue_broker.send("IN_QUEUE", {"n": 1})
            await queue_broker.join("IN_QUEUE")
        finally:
            await queue_broker.stop()
        assert received == [1]

    async def test_duplicate_listener_registered_once(self, queue_broker: EmbeddedBroker):
        """같은 리스너 중복 등록은 무시."""
        calls: list[int] = []

        async def listener(message: dict) -> None:
            calls.append(message["n"])

        queue_broker.add_listener("IN_QUEUE", listener)
        queue_broker.add_listener("IN_QUEUE", listener)
        await queue_broker.start()
        try:
            await queue_broker.send("IN_QUEUE", {"n": 7})
            await queue_broker.join("IN_QUEUE")
        finally:
            await queue_broker.stop()
        assert calls == [7]

    async def test_stop_drops_pending_messages(self, queue_broker: EmbeddedBroker):
        """중지 시 대기 중인 메시지는 버려짐."""
        started = asyncio.Event()

        async def slow_listener(message: dict) -> None:
            started.set()
            await asyncio.sleep(60)

        queue_broker.add_listener("IN_QUEUE", slow_listener)
        await queue_broker.start()
        await queue_broker.send("IN_QUEUE", {"n": 1})
        await queue_broker.send("IN_QUEUE", {"n": 2})
        await asyncio.wait_for(started.wait(), timeout=1)
        await queue_broker.stop()
        assert queue_broker.running is False


class TestBrokerErrors:
    """오류 처리 테스트."""

    def test_listener_on_unknown_queue(self, queue_broker: EmbeddedBroker):
        """선언되지 않은 큐에 리스너 등록 시 오류."""
        async def listener(message: dict) -> None:
            pass

        with pytest.raises(UnknownQueueError):
            queue_broker.add_listener("OUT_QUEUE", listener)

    async def test_send_to_unknown_queue(self, queue_broker: EmbeddedBroker):
        """선언되지 않은 큐로 전송 시 오류."""
        await queue_broker.start()
        try:
            with pytest.raises(UnknownQueueError):
                await queue_broker.send("OUT_QUEUE", {"n": 1})
        finally:
            await queue_broker.stop()

    async def test_join_when_stopped(self, queue_broker: EmbeddedBroker):
        """중지 상태에서 join 시 오류."""
        with pytest.raises(UnknownQueueError):
            await queue_broker.join("IN_QUEUE")
