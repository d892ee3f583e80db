"""Cross-process locks for the JSON files.

Terminals sharing one data directory coordinate through a sibling
``<name>.lock`` file, so a lock taken in one process is seen by every
other process (and every other lock object) on the same host.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from pos.domain.exceptions import PersistenceError

# Seconds to wait for a writer before giving up.
DEFAULT_TIMEOUT = 10.0


def lock_for(file_path: Path, timeout: float = DEFAULT_TIMEOUT) -> FileLock:
    """Return the lock guarding ``file_path``.

    ``timeout=0`` makes ``acquire()`` fail at once when the lock is held;
    ``filelock.Timeout`` is raised in both cases.
    """
    return FileLock(f"{file_path}.lock", timeout=timeout)


@contextmanager
def locked(file_path: Path, timeout: float = DEFAULT_TIMEOUT) -> Iterator[None]:
    """Hold the lock on ``file_path`` for a read-modify-write."""
    lock = lock_for(file_path, timeout=timeout)
    try:
        lock.acquire()
    except Timeout as exc:
        raise PersistenceError(
            f"{file_path.name} is locked by another terminal"
        ) from exc
    try:
        yield
    finally:
        lock.release()
