from __future__ import annotations

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status, permissions
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .exceptions import CarGuessError, EmptyCandidatePool, NotFound, PreconditionFailed
from .puzzles import EngineRegistry
from .serializers import (
    ModeQuerySerializer,
    GuessRequestSerializer,
    SearchQuerySerializer,
    PuzzleOverviewResponseSerializer,
    GuessResponseSerializer,
    SuggestionSerializer,
)
from . import services

logger = logging.getLogger(__name__)

_MODE_PARAM = openapi.Parameter(
    "mode", openapi.IN_QUERY, type=openapi.TYPE_STRING, enum=["easy", "hard"], required=False
)
_QUERY_PARAM = openapi.Parameter("q", openapi.IN_QUERY, type=openapi.TYPE_STRING, required=True)


def _error_response(exc: CarGuessError) -> Response:
    """Map application errors to HTTP status codes."""
    if isinstance(exc, NotFound):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PreconditionFailed):
        code = status.HTTP_412_PRECONDITION_FAILED
    else:
        if isinstance(exc, EmptyCandidatePool):
            logger.error("Catalog not provisioned: %s", exc)
        else:
            logger.exception("Unhandled puzzle error")
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response({"error": str(exc)}, status=code)


def _mode_from(request) -> str:
    serializer = ModeQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data["mode"]


# PUBLIC_INTERFACE
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="puzzle_today",
    operation_summary="Get today's puzzle",
    operation_description="""
Return today's puzzle for the requested mode, creating it on first access.
Today is computed in the configured puzzle time zone.

Query params:
- mode (optional, default 'easy'): easy | hard

Response:
- today: date, mode, puzzle_id, max_attempts
- yesterday: date, mode and the answer label, or null if there was no puzzle
""",
    manual_parameters=[_MODE_PARAM],
    responses={200: PuzzleOverviewResponseSerializer},
    tags=["puzzle"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def puzzle_today(request):
    """Resolve (or lazily create) today's puzzle."""
    mode = _mode_from(request)
    try:
        overview = services.get_puzzle_overview(mode)
    except CarGuessError as e:
        return _error_response(e)
    return Response(PuzzleOverviewResponseSerializer(overview).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="submit_guess",
    operation_summary="Submit a guess for a puzzle",
    operation_description="""
Compare a guessed car model (easy) or variant (hard) with the puzzle's target.

Query params:
- mode (optional, default 'easy'): must match the puzzle's mode

Request body:
- puzzle_id (int, required)
- guess_id (int, required): car model id (easy) or car variant id (hard)

Response: per-field feedback {status, value}, is_correct, and the guess values.
404 for unknown puzzle/guess, 412 when the puzzle is not today's or of another mode.
""",
    manual_parameters=[_MODE_PARAM],
    request_body=GuessRequestSerializer,
    responses={200: GuessResponseSerializer},
    tags=["game"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def submit_guess(request):
    """Evaluate a guess against the target of a puzzle."""
    mode = _mode_from(request)
    serializer = GuessRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    try:
        result = services.create_guess_feedback(vd["puzzle_id"], vd["guess_id"], mode)
    except CarGuessError as e:
        return _error_response(e)
    return Response(GuessResponseSerializer(result).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="search_models",
    operation_summary="Search car models",
    operation_description="Up to 10 car model suggestions matching make, model, generation or country.",
    manual_parameters=[_QUERY_PARAM],
    responses={200: SuggestionSerializer(many=True)},
    tags=["search"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def search_models(request):
    """Model suggestions for easy mode."""
    serializer = SearchQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    results = services.search_models(serializer.validated_data["q"])
    return Response(SuggestionSerializer(results, many=True).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="search_variants",
    operation_summary="Search car variants",
    operation_description="""
Up to 10 car variant suggestions. Matches make, model, generation and engine type,
fuel keywords (petrol, gasoline, diesel, electric, ev, hybrid), transmission
keywords (auto, automatic, manual, mt), and exact power (hp) or displacement (cc).
""",
    manual_parameters=[_QUERY_PARAM],
    responses={200: SuggestionSerializer(many=True)},
    tags=["search"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def search_variants(request):
    """Variant suggestions for hard mode."""
    serializer = SearchQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    results = services.search_variants(serializer.validated_data["q"])
    return Response(SuggestionSerializer(results, many=True).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_modes",
    operation_summary="List available modes",
    operation_description="Returns supported puzzle modes.",
    tags=["meta"],
    responses={200: openapi.Response("OK", schema=openapi.Schema(type=openapi.TYPE_ARRAY, items=openapi.Items(type=openapi.TYPE_STRING)))},
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def get_modes(request):
    """List available puzzle modes."""
    return Response(EngineRegistry.modes(), status=status.HTTP_200_OK)
