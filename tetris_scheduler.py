"""Drop timer: turns elapsed frame time into gravity ticks"""
from typing import Callable


class DropTimer:
    """
    Accumulates elapsed milliseconds and reports how many gravity ticks are
    due. The interval is read from ``interval_ms`` on every call, so a level
    change re-arms the timer at the new speed without any extra wiring.
    """
    def __init__(self, interval_ms: Callable[[], int]):
        self.interval_ms = interval_ms
        self.elapsed = 0.0
        self.armed_at = interval_ms()

    def advance(self, dt_ms: float) -> int:
        interval = self.interval_ms()
        if interval != self.armed_at:
            # new level: start counting afresh at the new interval
            self.armed_at = interval
            self.elapsed = 0.0
        self.elapsed += dt_ms
        due = int(self.elapsed // interval)
        self.elapsed -= due * interval
        return due

    def cancel(self):
        self.elapsed = 0.0
        self.armed_at = self.interval_ms()
