# engine/kernel.py

import heapq
import time
from collections.abc import Callable, Iterable

from .event import BaseEvent
from .hooks import KernelHooks, NoopHooks

Handler = Callable[[BaseEvent], Iterable[BaseEvent] | None]


class Kernel:
    """
    Single-threaded event dispatcher.

    Events run in (t, schedule order). Every handler subscribed to an event's
    type runs to completion before the next event is popped; events a handler
    returns are queued behind it.
    """

    def __init__(self, hooks: KernelHooks | None = None):
        self._t = 0.0
        self._q: list[tuple[float, int, BaseEvent]] = []
        self._seq = 0
        self._dispatched = 0
        self._subs: dict[type[BaseEvent], list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    @property
    def now(self) -> float:
        return self._t

    @property
    def pending(self) -> int:
        return len(self._q)

    def on(self, etype: type[BaseEvent], handler: Handler) -> None:
        self._subs.setdefault(etype, []).append(handler)

    def schedule(self, ev: BaseEvent) -> None:
        if ev.t < self._t - 1e-9:
            self._hooks.error(ev, reason="scheduled_past", scheduled_t=ev.t, now=self._t)
            raise RuntimeError(f"event scheduled in the past: {ev.t} < now {self._t}")
        self._seq += 1
        heapq.heappush(self._q, (ev.t, self._seq, ev))
        self._hooks.schedule(ev, now=self._t, qsize=len(self._q))

    def dispatch(self, ev: BaseEvent) -> int:
        """Schedule `ev` and drain the queue."""
        self.schedule(ev)
        return self.run()

    def run(self, max_events: int | None = None) -> int:
        t0 = time.perf_counter()
        self._hooks.run_start(qsize=len(self._q))
        processed = 0
        while self._q:
            t, _, ev = heapq.heappop(self._q)
            self._t = t
            self._dispatched += 1
            handlers = self._subs.get(type(ev), ())
            t1 = time.perf_counter()
            self._hooks.dispatch_start(
                ev, seq=self._dispatched, qsize=len(self._q), handlers=len(handlers)
            )
            total_out = 0
            for h in handlers:
                for nxt in h(ev) or ():
                    self.schedule(nxt)
                    total_out += 1
            ms = (time.perf_counter() - t1) * 1000
            self._hooks.dispatch_end(ev, out_events=total_out, ms=ms)
            processed += 1
            if max_events and processed >= max_events:
                break
        self._hooks.run_end(
            processed=processed,
            last_t=self._t,
            qsize=len(self._q),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return processed
