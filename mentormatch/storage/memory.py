"""
In-memory record storage.

Mentors and mentees live in two independent collections keyed by an
auto-incrementing integer id. Uploads replace a whole collection at once:
clear, reset the id counter to 1, then insert every record of the batch.
There is no partial update or delete-by-id.
"""

import dataclasses
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Generic, Iterable, Iterator, List, Tuple, TypeVar

from ..records.schema import Mentor, Mentee

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Mentor, Mentee)


class RecordCollection(Generic[RecordT]):
    """
    One id-keyed collection guarded by a lock.

    Attributes:
        name: Collection name used in log messages
    """

    def __init__(self, name: str):
        self.name = name
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def _insert(self, record: RecordT) -> RecordT:
        # Ids always come from the store
        stored = dataclasses.replace(record, id=self._next_id)
        self._records[stored.id] = stored
        self._next_id += 1
        return stored

    @contextmanager
    def locked(self) -> Iterator[List[RecordT]]:
        """
        Hold the collection lock and yield its records in insertion order.

        Writers block until the block exits.
        """
        with self._lock:
            yield list(self._records.values())

    def get_all(self) -> List[RecordT]:
        """All records in insertion order."""
        with self.locked() as records:
            return records

    def create(self, record: RecordT) -> RecordT:
        """Insert one record and return the stored copy with its id."""
        with self._lock:
            return self._insert(record)

    def clear(self) -> None:
        """Remove every record and reset the id counter."""
        with self._lock:
            self._records.clear()
            self._next_id = 1
        logger.info(f"Cleared {self.name}")

    def replace_all(self, records: Iterable[RecordT]) -> List[RecordT]:
        """
        Atomically swap the collection contents for a new batch.

        Returns:
            The stored records with their assigned ids
        """
        records = list(records)
        with self._lock:
            self._records.clear()
            self._next_id = 1
            stored = [self._insert(record) for record in records]
        logger.info(f"Replaced {self.name} with {len(stored)} records")
        return stored

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class MemStorage:
    """
    Process-local store for mentors and mentees.

    Writes are last-write-wins; each collection is replaced under its own
    lock, and ``snapshot`` reads both collections under both locks.
    """

    def __init__(self):
        self.mentors: RecordCollection[Mentor] = RecordCollection("mentors")
        self.mentees: RecordCollection[Mentee] = RecordCollection("mentees")

    def get_mentors(self) -> List[Mentor]:
        return self.mentors.get_all()

    def create_mentor(self, mentor: Mentor) -> Mentor:
        return self.mentors.create(mentor)

    def clear_mentors(self) -> None:
        self.mentors.clear()

    def replace_mentors(self, mentors: Iterable[Mentor]) -> List[Mentor]:
        return self.mentors.replace_all(mentors)

    def get_mentees(self) -> List[Mentee]:
        return self.mentees.get_all()

    def create_mentee(self, mentee: Mentee) -> Mentee:
        return self.mentees.create(mentee)

    def clear_mentees(self) -> None:
        self.mentees.clear()

    def replace_mentees(self, mentees: Iterable[Mentee]) -> List[Mentee]:
        return self.mentees.replace_all(mentees)

    def snapshot(self) -> Tuple[List[Mentor], List[Mentee]]:
        """Consistent copy of both collections for one ranking request."""
        with self.mentors.locked() as mentors, self.mentees.locked() as mentees:
            return mentors, mentees
