import hashlib
from collections import Counter

from .models import Properties


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash for the string."""
    return hashlib.sha256(value.encode('utf-8')).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if string reads the same forward and backward.

    Only case and whitespace are ignored; punctuation still counts.
    """
    normalized = ''.join(value.lower().split())
    return normalized == normalized[::-1]


def count_words(value: str) -> int:
    return len(value.split())


def analyze_string(value: str) -> Properties:
    """Compute all string properties."""
    return Properties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(value)),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=dict(Counter(value)),
    )
