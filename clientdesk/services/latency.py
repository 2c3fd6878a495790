# clientdesk/services/latency.py
"""
Latency policies: simulated network delay in front of every repository call.

Demos run with SimulatedLatency so the UI can show its loading states;
tests and the default configuration use NoLatency.
"""
import asyncio
from abc import ABC, abstractmethod


class LatencyPolicy(ABC):
    """Interface awaited by the repositories before touching their data."""

    @abstractmethod
    async def wait(self, operation: str, delay_ms: int) -> None:
        ...


class NoLatency(LatencyPolicy):
    async def wait(self, operation: str, delay_ms: int) -> None:
        return None


class SimulatedLatency(LatencyPolicy):
    """Sleeps for the delay declared by the service, multiplied by `scale`."""

    def __init__(self, scale: float = 1.0):
        if scale < 0:
            raise ValueError("Latency scale must be >= 0")
        self.scale = scale

    async def wait(self, operation: str, delay_ms: int) -> None:
        seconds = delay_ms * self.scale / 1000
        if seconds > 0:
            await asyncio.sleep(seconds)
