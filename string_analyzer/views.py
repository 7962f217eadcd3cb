import logging

from django.apps import apps
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .errors import (
    InvalidFilterValue,
    MissingField,
    StringAlreadyExists,
    StringNotFound,
    TypeMismatch,
    UnencodableValue,
    UnparseableQuery,
)
from .serializers import (
    StringAnalyzeSerializer,
    StringRecordSerializer,
    parse_analyze_payload,
    parse_filter_params,
    parse_natural_language_params,
)

logger = logging.getLogger(__name__)


class StoreMixin:
    """
    Gives a view its ContentStore.

    Pass one explicitly with ``as_view(store=...)``; otherwise the store
    owned by the app config is used.
    """
    store = None

    def get_store(self):
        if self.store is not None:
            return self.store
        return apps.get_app_config('string_analyzer').store


class HealthView(APIView):
    @swagger_auto_schema(operation_summary="Health check")
    def get(self, request):
        return Response({"status": "ok", "message": "String Analyzer API"}, status=status.HTTP_200_OK)


# POST & GET /strings

class StringAnalyzerView(StoreMixin, APIView):

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={201: "Created", 400: "Missing or unencodable value", 409: "Already exists", 422: "Value is not a string"},
    )
    def post(self, request):
        try:
            value = parse_analyze_payload(request.data)
        except MissingField as e:
            return Response({"error": e.message}, status=status.HTTP_400_BAD_REQUEST)
        except TypeMismatch as e:
            return Response({"error": e.message}, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
        except UnencodableValue as e:
            return Response({"error": e.message}, status=status.HTTP_400_BAD_REQUEST)

        try:
            record = services.create_string(self.get_store(), value)
        except StringAlreadyExists as e:
            return Response({"error": e.message}, status=status.HTTP_409_CONFLICT)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List all analyzed strings",
        manual_parameters=[
            openapi.Parameter(
                "is_palindrome",
                openapi.IN_QUERY,
                description="Filter by palindrome (true/false)",
                type=openapi.TYPE_BOOLEAN,
            ),
            openapi.Parameter(
                "min_length",
                openapi.IN_QUERY,
                description="Minimum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "max_length",
                openapi.IN_QUERY,
                description="Maximum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "word_count",
                openapi.IN_QUERY,
                description="Exact word count",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "contains_character",
                openapi.IN_QUERY,
                description="Filter strings that contain this character",
                type=openapi.TYPE_STRING,
            ),
        ],
    )
    def get(self, request):
        try:
            spec = parse_filter_params(request.query_params)
        except InvalidFilterValue as e:
            return Response({"error": e.message, "details": e.errors}, status=status.HTTP_400_BAD_REQUEST)

        result = services.list_filtered(self.get_store(), spec)
        serializer = StringRecordSerializer(result.records, many=True)

        return Response({
            "data": serializer.data,
            "count": result.count,
            "filters_applied": result.filters_applied,
        }, status=status.HTTP_200_OK)


# GET & DELETE /strings/{string_value}

class StringDetailView(StoreMixin, APIView):

    @swagger_auto_schema(operation_summary="Get an analyzed string by its value")
    def get(self, request, value):
        try:
            record = services.get_string(self.get_store(), value)
        except StringNotFound as e:
            return Response({"error": e.message}, status=status.HTTP_404_NOT_FOUND)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(operation_summary="Delete an analyzed string by its value")
    def delete(self, request, value):
        try:
            services.delete_string(self.get_store(), value)
        except StringNotFound as e:
            return Response({"error": e.message}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


# GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(StoreMixin, APIView):

    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ],
    )
    def get(self, request):
        try:
            query = parse_natural_language_params(request.query_params)
        except MissingField as e:
            return Response({"error": e.message}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = services.list_by_query(self.get_store(), query)
        except UnparseableQuery as e:
            return Response({
                "error": e.message,
                "interpreted_query": {
                    "original": e.original,
                    "parsed_filters": {},
                },
            }, status=status.HTTP_400_BAD_REQUEST)

        serialized = StringRecordSerializer(result.records, many=True)

        return Response({
            "data": serialized.data,
            "count": result.count,
            "interpreted_query": result.interpreted_query.as_dict(),
        }, status=status.HTTP_200_OK)
