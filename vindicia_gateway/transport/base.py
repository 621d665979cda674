"""Transport port (abstract interface) for provider calls."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping


class Transport(ABC):
    """
    Sends one operation to the billing provider and returns its reply.

    Implementations perform a single attempt. Network failures raise
    TransportError; provider faults raise ProviderFaultError. A reply that
    reports a business failure (e.g. a decline) is returned normally.
    """

    @abstractmethod
    def call(self, object_name: str, action: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Invoke object_name.action with payload and return the parsed reply."""
        ...

    def close(self) -> None:
        """Release any held connections."""
        return None

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
