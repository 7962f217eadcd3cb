from django.core.validators import ProhibitNullCharactersValidator
from rest_framework import serializers

from .errors import InvalidFilterValue, MissingField, TypeMismatch, UnencodableValue
from .models import FilterSpec


class StrictCharField(serializers.CharField):
    """CharField that refuses to coerce numbers and booleans into strings."""
    default_error_messages = {
        'invalid': "Value must be a string.",
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # NUL is an ordinary character here; it is hashed and stored like any other
        self.validators = [
            v for v in self.validators if not isinstance(v, ProhibitNullCharactersValidator)
        ]

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class StringRecordSerializer(serializers.Serializer):
    def to_representation(self, instance):
        return {
            'id': instance.id,
            'value': instance.value,
            'properties': instance.properties.as_dict(),
            'created_at': instance.created_at.isoformat() if instance.created_at is not None else None,
        }


class StringAnalyzeSerializer(serializers.Serializer):
    # stored verbatim, so no trimming; the empty string is a valid value
    value = StrictCharField(allow_blank=True, trim_whitespace=False)


class FilterQuerySerializer(serializers.Serializer):
    is_palindrome = serializers.BooleanField(required=False)
    min_length = serializers.IntegerField(required=False, min_value=0)
    max_length = serializers.IntegerField(required=False, min_value=0)
    word_count = serializers.IntegerField(required=False, min_value=0)
    contains_character = serializers.CharField(
        required=False, min_length=1, max_length=1, trim_whitespace=False)


class NaturalLanguageQuerySerializer(serializers.Serializer):
    query = serializers.CharField()


def parse_analyze_payload(data) -> str:
    """Return the string to analyze, or raise MissingField, TypeMismatch or UnencodableValue."""
    serializer = StringAnalyzeSerializer(data=data)
    if serializer.is_valid():
        return serializer.validated_data['value']

    errors = serializer.errors.get('value')
    code = errors[0].code if errors else None
    if code in ('invalid', 'null'):
        raise TypeMismatch()
    if code == 'surrogate_characters_not_allowed':
        raise UnencodableValue()
    raise MissingField()


def parse_filter_params(query_params) -> FilterSpec:
    """Turn query-string parameters into a typed FilterSpec."""
    # a plain dict, so absent booleans stay absent instead of becoming False
    data = query_params.dict() if hasattr(query_params, 'dict') else dict(query_params)
    serializer = FilterQuerySerializer(data=data)
    if not serializer.is_valid():
        field, messages = next(iter(serializer.errors.items()))
        raise InvalidFilterValue(f"{field}: {messages[0]}", errors=serializer.errors)
    return FilterSpec(**serializer.validated_data)


def parse_natural_language_params(query_params) -> str:
    serializer = NaturalLanguageQuerySerializer(data={'query': query_params.get('query', '')})
    if not serializer.is_valid():
        raise MissingField("Query parameter is required.")
    return serializer.validated_data['query']
