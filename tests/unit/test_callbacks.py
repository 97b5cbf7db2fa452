"""
Callback Call Style Unit Tests
"""

import asyncio
import concurrent.futures
import json
import threading
import time
from typing import List

import pytest

from openai_sdk import OpenAIClient
from openai_sdk.client.callbacks import CallResult, submit, watch
from openai_sdk.client.transport import Transport
from openai_sdk.exceptions import AuthenticationError, InvalidRequestError


class SlowTransport(Transport):
    """Answers every call with the same body after a delay"""

    def __init__(self, body: bytes, delay: float) -> None:
        self.body = body
        self.delay = delay
        self.completed = 0

    async def perform_request(self, path, method, body, headers, config) -> bytes:
        await asyncio.sleep(self.delay)
        self.completed += 1
        return self.body

    async def perform_multipart(self, path, form_data, config) -> bytes:
        return await self.perform_request(path, None, None, {}, config)


class TestCallResult:

    def test_value(self):
        result = CallResult(value=3)
        assert result.ok
        assert result.unwrap() == 3

    def test_error(self):
        error = AuthenticationError()
        result = CallResult(error=error)
        assert not result.ok
        with pytest.raises(AuthenticationError):
            result.unwrap()


class TestCallbackInsideEventLoop:
    """Callback style started from a coroutine"""

    @pytest.mark.asyncio
    async def test_success_delivered_once(self, client, mock_transport, chat_response):
        mock_transport.set_response(chat_response)
        results: List[CallResult] = []
        delivered = asyncio.Event()

        def callback(result: CallResult) -> None:
            results.append(result)
            delivered.set()

        handle = client.chat.send_with_callback(
            [client.chat.user_message("Hello!")], callback, model="gpt-4"
        )
        await asyncio.wait_for(delivered.wait(), timeout=5)
        await asyncio.sleep(0)

        assert len(results) == 1
        assert results[0].ok
        assert results[0].value.first_content == "Hello, how can I help you today?"
        assert mock_transport.last_request.json()["model"] == "gpt-4"
        assert handle.done()
        assert handle.cancel() is False

    @pytest.mark.asyncio
    async def test_failure_delivered(self, client, mock_transport):
        mock_transport.set_response(b"", status_code=401)
        results: List[CallResult] = []
        delivered = asyncio.Event()

        def callback(result: CallResult) -> None:
            results.append(result)
            delivered.set()

        client.moderation.moderate_with_callback("Hello", callback)
        await asyncio.wait_for(delivered.wait(), timeout=5)

        assert len(results) == 1
        assert results[0].value is None
        assert isinstance(results[0].error, AuthenticationError)

    @pytest.mark.asyncio
    async def test_validation_failure_delivered(self, client, mock_transport):
        results: List[CallResult] = []
        delivered = asyncio.Event()

        def callback(result: CallResult) -> None:
            results.append(result)
            delivered.set()

        client.images.generate_with_callback("", callback)
        await asyncio.wait_for(delivered.wait(), timeout=5)

        assert isinstance(results[0].error, InvalidRequestError)
        assert mock_transport.requests == []

    @pytest.mark.asyncio
    async def test_cancel_prevents_callback(self, config):
        transport = SlowTransport(b'{"text": "late"}', delay=0.2)
        client = OpenAIClient(config, transport=transport)
        results: List[CallResult] = []

        handle = client.audio.translate_with_callback(b"RIFF", "a.wav", results.append)
        await asyncio.sleep(0.05)

        assert handle.cancel() is True
        assert handle.cancelled()
        await asyncio.sleep(0.4)

        assert results == []
        assert handle.done()

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, config):
        body = json.dumps({
            "object": "list",
            "data": [{"embedding": [1.0], "index": 0}],
        }).encode()
        transport = SlowTransport(body, delay=0.05)
        client = OpenAIClient(config, transport=transport)
        results: List[CallResult] = []

        handles = [
            client.embeddings.create_with_callback(f"text {i}", results.append)
            for i in range(5)
        ]
        handles[0].cancel()
        await asyncio.sleep(0.3)

        assert len(results) == 4
        assert all(result.ok for result in results)

    @pytest.mark.asyncio
    async def test_wait_is_rejected_inside_loop(self, client, mock_transport, chat_response):
        mock_transport.set_response(chat_response)
        handle = client.completions.send_with_callback("Hello", lambda result: None)

        with pytest.raises(RuntimeError):
            handle.wait()

        handle.cancel()


class TestCallbackFromSyncCode:
    """Callback style started without a running event loop"""

    def test_success_delivered_on_background_loop(self, client, mock_transport, chat_response):
        mock_transport.set_response(chat_response)
        results: List[CallResult] = []
        threads: List[str] = []

        def callback(result: CallResult) -> None:
            threads.append(threading.current_thread().name)
            results.append(result)

        handle = client.chat.send_with_callback([client.chat.user_message("Hello!")], callback)

        assert handle.wait(timeout=5)
        assert len(results) == 1
        assert results[0].unwrap().first_content == "Hello, how can I help you today?"
        assert threads == ["openai-sdk-callbacks"]

    def test_cancel_prevents_callback(self, config):
        transport = SlowTransport(b'{"text": "late"}', delay=0.2)
        client = OpenAIClient(config, transport=transport)
        results: List[CallResult] = []

        handle = client.audio.transcribe_with_callback(b"RIFF", "a.wav", results.append)
        assert handle.cancel() is True
        handle.wait(timeout=5)
        time.sleep(0.3)

        assert results == []
        assert handle.cancelled()

    def test_result_landing_during_cancel_is_dropped(self):
        """Should not deliver a result that arrives while cancel() is in progress"""

        class CompletesWhileCancelling(concurrent.futures.Future):
            def cancel(self):
                worker = threading.Thread(target=self.set_result, args=("value",))
                worker.start()
                worker.join()
                return super().cancel()

        results: List[CallResult] = []
        handle = watch(CompletesWhileCancelling(), results.append)

        assert handle.cancel() is True
        assert handle.wait(timeout=5)
        assert results == []

    def test_cancel_after_delivery_returns_false(self):
        future: concurrent.futures.Future = concurrent.futures.Future()
        results: List[CallResult] = []
        handle = watch(future, results.append)

        future.set_result("value")

        assert handle.cancel() is False
        assert not handle.cancelled()
        assert results == [CallResult(value="value")]

    def test_cancel_and_delivery_are_mutually_exclusive(self):
        """Either cancel() wins or the callback runs, never both"""
        for i in range(200):
            future: concurrent.futures.Future = concurrent.futures.Future()
            results: List[CallResult] = []
            handle = watch(future, results.append)
            barrier = threading.Barrier(2)

            def finish(value=i, future=future, barrier=barrier):
                barrier.wait()
                try:
                    future.set_result(value)
                except concurrent.futures.InvalidStateError:
                    pass

            worker = threading.Thread(target=finish)
            worker.start()
            barrier.wait()
            cancelled = handle.cancel()
            worker.join()

            assert handle.wait(timeout=5)
            assert cancelled is not (len(results) == 1)
            assert len(results) <= 1

    def test_submit_runs_any_coroutine(self):
        results: List[CallResult] = []

        async def compute() -> int:
            return 42

        handle = submit(compute(), results.append)

        assert handle.wait(timeout=5)
        assert results == [CallResult(value=42)]
