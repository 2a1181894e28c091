import datetime
import threading
from typing import List, Optional

from .schemas import Task


def log(msg: str):
    ts = datetime.datetime.now(datetime.timezone.utc).isoformat()
    print(f"[{ts}] {msg}")


class TaskStore:
    """
    In-memory, insertion-ordered task store for the lifetime of the process.

    All operations run under a single lock. The store does no uniqueness
    checks of its own; handlers generate ids and look records up before
    mutating them.
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def append(self, task: Task) -> None:
        with self._lock:
            self._tasks.append(task)

    def find_index_by_id(self, task_id: str) -> Optional[int]:
        with self._lock:
            for i, task in enumerate(self._tasks):
                if task.id == task_id:
                    return i
            return None

    def replace_at(self, index: int, task: Task) -> None:
        with self._lock:
            self._tasks[index] = task

    def remove_at(self, index: int) -> None:
        with self._lock:
            del self._tasks[index]

    def replace_by_id(self, task_id: str, task: Task) -> Optional[Task]:
        """Replace the record with ``task_id``; returns the stored task or None if absent."""
        with self._lock:
            index = self.find_index_by_id(task_id)
            if index is None:
                return None
            self.replace_at(index, task)
            return task

    def remove_by_id(self, task_id: str) -> bool:
        with self._lock:
            index = self.find_index_by_id(task_id)
            if index is None:
                return False
            self.remove_at(index)
            return True
