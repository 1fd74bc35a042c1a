"""
One run at a time.

A run takes two locks:
- a process-local lock, so two calls inside one process can't overlap
- an fcntl file lock in the vault, so two `weekly-summarizer` processes
  pointed at the same vault can't overlap either

Both are non-blocking: a second run is rejected, not queued.
"""

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import RunInProgressError, StoreError

LOCK_FILE_NAME = ".weekly-summarizer.lock"

_process_lock = threading.Lock()


@contextmanager
def run_lock(lock_path: Path | None = None) -> Iterator[None]:
    """
    Hold the run lock for the duration of a `with` block.

    Syntax notes:
    - @contextmanager turns this generator into something usable with `with`
    - Code before `yield` runs on enter, the `finally` block runs on exit
    - Lock.acquire(blocking=False) returns False instead of waiting

    Args:
        lock_path: File to flock. None skips the cross-process lock.

    Raises:
        RunInProgressError: If another run holds either lock.
    """
    if not _process_lock.acquire(blocking=False):
        raise RunInProgressError("A weekly summary run is already in progress.")

    handle = None
    try:
        if lock_path is not None:
            handle = _acquire_file_lock(lock_path)
        yield
    finally:
        if handle is not None:
            _release_file_lock(handle)
        _process_lock.release()


def _acquire_file_lock(lock_path: Path):
    try:
        import fcntl
    except ModuleNotFoundError:
        # No fcntl on this platform; the process-local lock still applies
        return None

    try:
        lock_path.parent.mkdir(parents=True, exist_ok=True)
        handle = lock_path.open("a+", encoding="utf-8")
    except OSError as e:
        raise StoreError(f"Could not open lock file {lock_path}: {e}") from e

    try:
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
    except OSError as e:
        handle.close()
        raise RunInProgressError(f"Another run is already using this vault (lock: {lock_path}).") from e
    return handle


def _release_file_lock(handle) -> None:
    import fcntl

    try:
        fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
    finally:
        handle.close()
