# tests/engine/test_kernel_dispatch.py
from dataclasses import dataclass

import pytest

from path_planner.engine.event import BaseEvent
from path_planner.engine.hooks import NoopHooks
from path_planner.engine.kernel import Kernel


# ---- demo domain events ----
@dataclass(order=True)
class Ping(BaseEvent):
    n: int = 0


@dataclass(order=True)
class Pong(BaseEvent):
    n: int = 0


# ---- demo handlers ----
def handle_ping(ev: Ping):
    out: list[BaseEvent] = [Pong(t=ev.t, n=ev.n)]
    if ev.n > 0:
        out.append(Ping(t=ev.t + 1.0, n=ev.n - 1))
    return out


# --- test hook that records dispatch order & times ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []
        self.errors = []

    def dispatch_start(self, ev, *, seq, qsize, handlers):
        self.trace.append((ev.t, type(ev).__name__, seq))

    def error(self, ev, *, reason, **kw):
        self.errors.append(reason)


def test_follow_ups_run_in_time_then_schedule_order():
    hooks = TraceHooks()
    k = Kernel(hooks=hooks)
    k.on(Ping, handle_ping)
    k.on(Pong, lambda ev: None)

    processed = k.dispatch(Ping(t=0.0, n=2))
    assert processed == 6
    assert [name for _, name, _ in hooks.trace] == ["Ping", "Pong", "Ping", "Pong", "Ping", "Pong"]
    assert [t for t, _, _ in hooks.trace] == [0.0, 0.0, 1.0, 1.0, 2.0, 2.0]
    assert [seq for _, _, seq in hooks.trace] == [1, 2, 3, 4, 5, 6]
    assert k.pending == 0
    assert k.now == 2.0


def test_handlers_run_in_subscription_order_and_ties_are_fifo():
    k = Kernel()
    seen: list[str] = []
    k.on(Ping, lambda ev: seen.append(f"A{ev.n}"))
    k.on(Ping, lambda ev: seen.append(f"B{ev.n}"))
    k.schedule(Ping(t=5.0, n=1))
    k.schedule(Ping(t=5.0, n=2))
    k.run()
    assert seen == ["A1", "B1", "A2", "B2"]


def test_max_events_gate():
    k = Kernel()
    k.on(Ping, handle_ping)
    k.schedule(Ping(t=0.0, n=10))
    assert k.run(max_events=1) == 1
    assert k.now == 0.0
    assert k.pending == 2


def test_unsubscribed_events_are_still_dispatched():
    hooks = TraceHooks()
    k = Kernel(hooks=hooks)
    assert k.dispatch(Pong(t=1.0)) == 1
    assert hooks.trace == [(1.0, "Pong", 1)]


def test_scheduling_in_the_past_raises_and_reports():
    hooks = TraceHooks()
    k = Kernel(hooks=hooks)
    k.on(Ping, lambda ev: [Ping(t=ev.t - 1.0, n=0)])
    k.schedule(Ping(t=1.0, n=0))
    with pytest.raises(RuntimeError):
        k.run()
    assert hooks.errors == ["scheduled_past"]


def test_handler_exceptions_propagate():
    def boom(ev):
        raise ValueError("boom")

    k = Kernel()
    k.on(Ping, boom)
    with pytest.raises(ValueError):
        k.dispatch(Ping(t=0.0))
