"""Message-passing boundary between parsers and validity rules."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from configlint.domain.events import ParserEvent
from configlint.rules.dialect import DialectRule, Handler

logger = logging.getLogger(__name__)

_CLOSED = object()


class EventChannel:
    """Queue of parser events; closing it ends :meth:`Dispatcher.run`."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    async def publish(self, event: ParserEvent) -> None:
        if self._closed:
            raise RuntimeError("Cannot publish on a closed event channel.")
        await self._queue.put(event)

    async def close(self) -> None:
        if not self._closed:
            self._closed = True
            await self._queue.put(_CLOSED)

    async def receive(self) -> Optional[ParserEvent]:
        item = await self._queue.get()
        if item is _CLOSED:
            return None
        return item


@dataclass
class EventFailure:
    event: ParserEvent
    error: BaseException


@dataclass
class DispatchSummary:
    handled: int = 0
    failures: List[EventFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class Dispatcher:
    """Routes each event to the rules subscribed to its name.

    Every event is handled in its own task; a failure while handling one
    resource is recorded without affecting the others.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, rule: DialectRule) -> None:
        for name, handler in rule.subscriptions.items():
            self._handlers.setdefault(name, []).append(handler)

    def handlers_for(self, name: str) -> List[Handler]:
        return list(self._handlers.get(name, ()))

    async def _dispatch(self, event: ParserEvent) -> int:
        handlers = self.handlers_for(event.name)
        if not handlers:
            logger.debug("No subscribers for %s (%s)", event.name, event.resource)
        for handler in handlers:
            await handler(event)
        return len(handlers)

    async def run(self, channel: EventChannel) -> DispatchSummary:
        events: List[ParserEvent] = []
        tasks: List[asyncio.Task] = []
        while True:
            event = await channel.receive()
            if event is None:
                break
            events.append(event)
            tasks.append(asyncio.create_task(self._dispatch(event)))

        summary = DispatchSummary()
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for event, result in zip(events, results):
            if isinstance(result, BaseException):
                logger.error("Handling %s for %s failed: %s", event.name, event.resource, result)
                summary.failures.append(EventFailure(event=event, error=result))
            else:
                summary.handled += result
        return summary


__all__ = ["EventChannel", "EventFailure", "DispatchSummary", "Dispatcher"]
