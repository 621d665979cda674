"""
Configurable fake transport for development and testing.

Simulates the provider without any network calls. Replies can be queued
one by one, or the transport can be switched between answering every call
with a success or a failure return block.
"""
from collections import deque
from typing import Any, Deque, Dict, List, Mapping, Union
from uuid import uuid4

from vindicia_gateway.transport.base import Transport


class FakeTransport(Transport):
    """Fake transport that records calls."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_code: int = 400
        self.failure_message: str = "Card declined"
        self.calls: List[Dict[str, Any]] = []
        self._queued: Deque[Union[Dict[str, Any], Exception]] = deque()

    def configure(
        self,
        should_succeed: bool,
        failure_code: int = 400,
        failure_message: str = "Card declined",
    ) -> None:
        """Configure default reply behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_code = failure_code
        self.failure_message = failure_message

    def queue_reply(self, reply: Dict[str, Any]) -> None:
        """Return reply from the next call instead of the default."""
        self._queued.append(reply)

    def queue_error(self, error: Exception) -> None:
        """Raise error from the next call."""
        self._queued.append(error)

    @staticmethod
    def return_block(code: int, message: str) -> Dict[str, Any]:
        return {
            "returnCode": str(code),
            "returnString": message,
            "soapId": uuid4().hex,
        }

    def call(self, object_name: str, action: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        self.calls.append({"object": object_name, "action": action, "payload": dict(payload)})

        if self._queued:
            queued = self._queued.popleft()
            if isinstance(queued, Exception):
                raise queued
            return queued

        if self.should_succeed:
            return {"return": self.return_block(200, "OK")}
        return {"return": self.return_block(self.failure_code, self.failure_message)}

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]
