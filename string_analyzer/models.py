from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Properties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str  # sha256 hex length = 64
    character_frequency_map: Dict[str, int] = field(hash=False)

    def as_dict(self) -> dict:
        return {
            'length': self.length,
            'is_palindrome': self.is_palindrome,
            'unique_characters': self.unique_characters,
            'word_count': self.word_count,
            'sha256_hash': self.sha256_hash,
            'character_frequency_map': dict(self.character_frequency_map),
        }


@dataclass(frozen=True)
class StringRecord:
    """One analyzed string, keyed by the SHA-256 of its value."""
    id: str
    value: str
    properties: Properties
    created_at: datetime

    def __str__(self):
        return f"{self.value} - {self.id[:50]}"


@dataclass(frozen=True)
class FilterSpec:
    """
    Optional-field set of constraints used when listing records.

    ``None`` means the field was not supplied and imposes no constraint.
    """
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def as_dict(self) -> dict:
        """Only the fields that were actually supplied."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.as_dict()


@dataclass(frozen=True)
class FilterResult:
    records: List[StringRecord]
    filters_applied: dict

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class InterpretedQuery:
    original: str
    filters: FilterSpec

    def as_dict(self) -> dict:
        return {
            'original': self.original,
            'parsed_filters': self.filters.as_dict(),
        }


@dataclass(frozen=True)
class QueryResult:
    records: List[StringRecord]
    interpreted_query: InterpretedQuery

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def filters_applied(self) -> dict:
        return self.interpreted_query.filters.as_dict()
