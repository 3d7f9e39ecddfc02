# maze_solver/utils/stopwatch.py
import time


class Stopwatch:
    """Wall-clock timer reporting whole elapsed milliseconds."""

    def __init__(self):
        self._start = time.time()

    def start(self):
        self._start = time.time()

    def elapsed_ms(self) -> int:
        return int((time.time() - self._start) * 1000)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        return False
