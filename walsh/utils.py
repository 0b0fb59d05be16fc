"""
Utility Functions

Filesystem and timing helpers shared by the rendering and pipeline code.
"""

import os
import time


def ensure_dir(path: str):
    """Create directory if it doesn't exist. An empty path means the cwd."""
    if path:
        os.makedirs(path, exist_ok=True)


def ensure_parent_dir(path: str):
    """Create the parent directory of a file path."""
    ensure_dir(os.path.dirname(str(path)))


class Timer:
    """Simple timer for profiling."""

    def __init__(self):
        self.start_time = None
        self.elapsed = 0.0

    def start(self):
        self.start_time = time.perf_counter()

    def stop(self) -> float:
        if self.start_time is not None:
            self.elapsed = time.perf_counter() - self.start_time
            self.start_time = None
        return self.elapsed

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *args):
        self.stop()


def format_time(seconds: float) -> str:
    """Format seconds into human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    return f"{seconds / 60:.1f}m"
