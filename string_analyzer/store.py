import logging
import threading

from django.utils import timezone

from .errors import StringAlreadyExists, StringNotFound
from .models import StringRecord
from .utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


class ContentStore:
    """
    In-memory, content-addressed store of analyzed strings.

    Records are keyed by the SHA-256 of their value, so callers always look
    them up by content. A single lock serializes every access to the mapping.
    """

    def __init__(self):
        self._records = {}
        self._lock = threading.Lock()

    def insert(self, value: str) -> StringRecord:
        props = analyze_string(value)
        with self._lock:
            if props.sha256_hash in self._records:
                raise StringAlreadyExists()
            record = StringRecord(
                id=props.sha256_hash,
                value=value,
                properties=props,
                created_at=timezone.now(),
            )
            self._records[record.id] = record
        logger.info("Stored string %s (length=%d)", record.id[:12], props.length)
        return record

    def get(self, value: str) -> StringRecord:
        key = compute_sha256(value)
        with self._lock:
            record = self._records.get(key)
        if record is None:
            raise StringNotFound()
        return record

    def delete(self, value: str) -> StringRecord:
        key = compute_sha256(value)
        with self._lock:
            record = self._records.pop(key, None)
        if record is None:
            raise StringNotFound()
        logger.info("Deleted string %s", key[:12])
        return record

    def list(self):
        """Snapshot of all records, in insertion order."""
        with self._lock:
            return list(self._records.values())

    def clear(self):
        with self._lock:
            self._records.clear()

    def __len__(self):
        with self._lock:
            return len(self._records)

    def __contains__(self, value):
        if not isinstance(value, str):
            return False
        key = compute_sha256(value)
        with self._lock:
            return key in self._records
