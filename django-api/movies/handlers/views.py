"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Pass the request's session token to the service explicitly
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from movies.auth import SignedTokenGate
from movies.domain.errors import DomainError, ErrorCode
from movies.handlers.serializers import (
    MovieCreateSerializer,
    MoviePatchSerializer,
    MovieSerializer,
    SessionRequestSerializer,
    SessionSerializer,
)
from movies.services import MovieService, get_movie_service

ERROR_STATUS = {
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MOVIE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    return Response({"error": error.message}, status=ERROR_STATUS[error.code])


def invalid_body_response(errors: dict | list) -> Response:
    if isinstance(errors, dict):
        field, messages = next(iter(errors.items()))
        message = f"{field}: {messages[0]}"
    else:
        message = str(errors[0])
    return Response({"error": message}, status=status.HTTP_400_BAD_REQUEST)


def session_token(request: Request) -> str | None:
    """Return the bearer token from the Authorization header, if any."""
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class MovieAPIView(APIView):
    """Base view wiring the movie service."""

    def get_service(self) -> MovieService:
        return get_movie_service()


class MovieListView(MovieAPIView):
    """Handler for GET/POST /api/movies"""

    def get(self, request: Request) -> Response:
        try:
            movies = self.get_service().list_active(session_token(request))
        except DomainError as err:
            return error_response(err)
        return Response(MovieSerializer(movies, many=True).data)

    def post(self, request: Request) -> Response:
        token = session_token(request)
        service = self.get_service()
        serializer = MovieCreateSerializer(data=request.data)
        try:
            service.authorize(token)
            if not serializer.is_valid():
                return invalid_body_response(serializer.errors)
            movie = service.create_movie(
                token,
                serializer.validated_data["name"],
                serializer.validated_data["genre"],
            )
        except DomainError as err:
            return error_response(err)
        return Response(MovieSerializer(movie).data, status=status.HTTP_201_CREATED)


class MovieDetailView(MovieAPIView):
    """Handler for GET/PATCH/DELETE /api/movies/{movie_id}"""

    def get(self, request: Request, movie_id: str) -> Response:
        try:
            movie = self.get_service().get_movie(session_token(request), movie_id)
        except DomainError as err:
            return error_response(err)
        return Response(MovieSerializer(movie).data)

    def patch(self, request: Request, movie_id: str) -> Response:
        token = session_token(request)
        service = self.get_service()
        serializer = MoviePatchSerializer(data=request.data)
        try:
            service.authorize(token)
            if not serializer.is_valid():
                return invalid_body_response(serializer.errors)
            movie = service.update_movie(token, movie_id, **serializer.validated_data)
        except DomainError as err:
            return error_response(err)
        return Response(MovieSerializer(movie).data)

    def delete(self, request: Request, movie_id: str) -> Response:
        try:
            self.get_service().hard_delete(session_token(request), movie_id)
        except DomainError as err:
            return error_response(err)
        return Response({"message": "Movie deleted successfully"})


class SessionView(APIView):
    """Handler for POST /api/auth/session"""

    def post(self, request: Request) -> Response:
        serializer = SessionRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_body_response(serializer.errors)
        try:
            session = SignedTokenGate.from_settings().authenticate(
                serializer.validated_data["password"]
            )
        except DomainError as err:
            return Response({"error": "Invalid password"}, status=ERROR_STATUS[err.code])
        return Response(SessionSerializer(session).data)
