"""Exceptions raised by the string analyzer core and its request validation."""


class StringAnalyzerError(Exception):
    """Base class for all string analyzer errors."""
    default_message = "String analyzer error."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class MissingField(StringAnalyzerError):
    default_message = "Missing 'value' field in request body."


class TypeMismatch(StringAnalyzerError):
    default_message = "'value' must be a string."


class UnencodableValue(StringAnalyzerError):
    default_message = "'value' contains unpaired surrogate characters and cannot be hashed."


class StringAlreadyExists(StringAnalyzerError):
    default_message = "String already exists in the system."


class StringNotFound(StringAnalyzerError):
    default_message = "String not found."


class InvalidFilterValue(StringAnalyzerError):
    default_message = "Invalid filter value."

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or {}


class UnparseableQuery(StringAnalyzerError):
    default_message = "Unable to parse natural language query."

    def __init__(self, original, message=None):
        super().__init__(message)
        self.original = original

