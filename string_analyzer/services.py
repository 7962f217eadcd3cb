"""
Operations the HTTP layer calls on the string store.

Structured and natural-language listing both end up in ``list_filtered`` so
there is one filtering code path.
"""
from .filters import apply_filters
from .interpreter import interpret_query
from .models import FilterResult, FilterSpec, QueryResult


def create_string(store, value):
    return store.insert(value)


def get_string(store, value):
    return store.get(value)


def delete_string(store, value):
    return store.delete(value)


def list_filtered(store, spec: FilterSpec) -> FilterResult:
    return apply_filters(store.list(), spec)


def list_by_query(store, query: str) -> QueryResult:
    interpreted = interpret_query(query)
    result = list_filtered(store, interpreted.filters)
    return QueryResult(records=result.records, interpreted_query=interpreted)
