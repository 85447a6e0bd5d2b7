"""
Identifier allocation - order ids, receipt numbers, transaction ids
"""
import threading
import time


class IdAllocator:
    """Thread-safe sequential id source producing "<prefix>-<n>" strings.

    Each instance owns its own counter, so two registries (or two tests)
    never share an id space.
    """

    def __init__(self, prefix: str, start: int = 1):
        self.prefix = prefix
        self._start = start
        self._next = start
        self._lock = threading.Lock()

    def allocate(self) -> str:
        # 다음 번호를 원자적으로 발급
        with self._lock:
            value = self._next
            self._next += 1
        return f"{self.prefix}-{value}"

    def peek(self) -> str:
        # 다음에 발급될 id 미리보기 (카운터는 변경하지 않음)
        with self._lock:
            return f"{self.prefix}-{self._next}"

    def reset(self) -> None:
        with self._lock:
            self._next = self._start


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def generate_transaction_id(prefix: str) -> str:
    """Opaque payment transaction id: CASH-1700000000000"""
    return f"{prefix}-{epoch_millis()}"


def generate_tracking_number() -> str:
    return f"TRK-{epoch_millis()}"
