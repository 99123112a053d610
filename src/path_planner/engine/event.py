# engine/event.py
from dataclasses import dataclass


@dataclass(order=True)
class BaseEvent:
    # Logical time: the orchestrator stamps one tick per user command and
    # follow-up events inherit it.
    t: float
