from typing import Awaitable, Callable, Dict, Optional
from loguru import logger
import asyncio


class LedgerTransport:
    """Latency boundary in front of the ledger.

    Stands in for the network round-trip of a contract call. The delay is
    awaited before the caller enters the store's critical section, so a
    slow call never holds the write lock. A latency of zero skips the
    suspension entirely.
    """

    def __init__(
        self,
        latency_seconds: float = 0.0,
        operation_latency: Optional[Dict[str, float]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        self.latency_seconds = latency_seconds
        self.operation_latency = dict(operation_latency or {})
        self._sleep = sleep

    def latency_for(self, operation: str) -> float:
        return self.operation_latency.get(operation, self.latency_seconds)

    async def round_trip(self, operation: str) -> None:
        delay = self.latency_for(operation)
        if delay <= 0:
            return
        logger.debug(f"Ledger call {operation}: simulating {delay:.3f}s round trip")
        await self._sleep(delay)
