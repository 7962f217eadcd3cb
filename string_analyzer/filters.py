import logging

from .models import FilterResult, FilterSpec

logger = logging.getLogger(__name__)


def _predicates(spec: FilterSpec):
    if spec.is_palindrome is not None:
        yield lambda r: r.properties.is_palindrome == spec.is_palindrome
    if spec.min_length is not None:
        yield lambda r: r.properties.length >= spec.min_length
    if spec.max_length is not None:
        yield lambda r: r.properties.length <= spec.max_length
    if spec.word_count is not None:
        yield lambda r: r.properties.word_count == spec.word_count
    if spec.contains_character is not None:
        # case-sensitive, on the raw stored value
        yield lambda r: spec.contains_character in r.value


def apply_filters(records, spec: FilterSpec) -> FilterResult:
    """
    Keep the records matching every supplied field of ``spec``.

    Absent fields impose no constraint. The applied filters are echoed back
    exactly as supplied.
    """
    predicates = list(_predicates(spec))
    matched = [r for r in records if all(p(r) for p in predicates)]
    filters_applied = spec.as_dict()
    logger.debug("Filters %s matched %d record(s)", filters_applied, len(matched))
    return FilterResult(records=matched, filters_applied=filters_applied)
