"""Shared test helpers for Pomodoro Timer."""

from pomodoro.timer.engine import TimerEngine


class SignalSpy:
    """Connects to a pyqtSignal and keeps every emitted payload."""

    def __init__(self, signal):
        self.received: list = []
        signal.connect(self._record)

    def _record(self, *args):
        self.received.append(args[0] if len(args) == 1 else args)

    @property
    def last(self):
        return self.received[-1] if self.received else None


class FakeCall:
    def __init__(self, seconds, callback):
        self.seconds = seconds
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self):
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records ``call_later`` requests; tests fire them explicitly."""

    def __init__(self):
        self.calls: list[FakeCall] = []

    def call_later(self, seconds, callback):
        call = FakeCall(seconds, callback)
        self.calls.append(call)
        return call

    @property
    def pending(self) -> list[FakeCall]:
        return [c for c in self.calls if c.active]

    def fire_next(self) -> bool:
        """Fire the oldest pending call.  Returns False when none is pending."""
        pending = self.pending
        if not pending:
            return False
        call = pending[0]
        call.fired = True
        call.callback()
        return True


def run_ticks(engine: TimerEngine, count: int) -> None:
    for _ in range(count):
        engine.tick()
