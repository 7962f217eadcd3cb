from django.test import SimpleTestCase

from string_analyzer.filters import apply_filters
from string_analyzer.models import FilterSpec
from string_analyzer.store import ContentStore


class ApplyFiltersTests(SimpleTestCase):
    def setUp(self):
        self.store = ContentStore()
        for value in ["aa", "aaa", "ab", "Level", "hello world", "A"]:
            self.store.insert(value)

    def values(self, spec):
        return {r.value for r in apply_filters(self.store.list(), spec).records}

    def test_and_composition(self):
        store = ContentStore()
        for value in ["aa", "aaa", "ab"]:
            store.insert(value)
        result = apply_filters(store.list(), FilterSpec(min_length=2, contains_character="a"))
        # "ab" is two characters long and contains "a", so it matches too
        self.assertEqual({r.value for r in result.records}, {"aa", "aaa", "ab"})
        self.assertEqual(result.filters_applied, {"min_length": 2, "contains_character": "a"})

        result = apply_filters(store.list(), FilterSpec(min_length=2, contains_character="a", is_palindrome=True))
        self.assertEqual({r.value for r in result.records}, {"aa", "aaa"})

    def test_empty_spec_returns_everything(self):
        result = apply_filters(self.store.list(), FilterSpec())
        self.assertEqual(result.count, 6)
        self.assertEqual(result.filters_applied, {})

    def test_is_palindrome(self):
        self.assertEqual(self.values(FilterSpec(is_palindrome=True)), {"aa", "aaa", "Level", "A"})
        self.assertEqual(self.values(FilterSpec(is_palindrome=False)), {"ab", "hello world"})

    def test_length_bounds_are_inclusive(self):
        self.assertEqual(self.values(FilterSpec(min_length=3, max_length=5)), {"aaa", "Level"})

    def test_word_count(self):
        self.assertEqual(self.values(FilterSpec(word_count=2)), {"hello world"})

    def test_contains_character_is_case_sensitive(self):
        self.assertEqual(self.values(FilterSpec(contains_character="A")), {"A"})
        self.assertEqual(self.values(FilterSpec(contains_character="L")), {"Level"})

    def test_false_and_zero_values_are_applied(self):
        result = apply_filters(self.store.list(), FilterSpec(is_palindrome=False, min_length=0))
        self.assertEqual(result.filters_applied, {"is_palindrome": False, "min_length": 0})
        self.assertEqual(result.count, 2)

    def test_predicate_order_does_not_matter(self):
        records = self.store.list()
        forward = apply_filters(records, FilterSpec(min_length=2, is_palindrome=True))
        backward = apply_filters(list(reversed(records)), FilterSpec(is_palindrome=True, min_length=2))
        self.assertEqual({r.id for r in forward.records}, {r.id for r in backward.records})
