"""Serializers for transforming domain models to API responses and parsing input."""

from rest_framework import serializers


class MovieSerializer(serializers.Serializer):
    """Serializer for Movie domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    genre = serializers.CharField()
    seen = serializers.BooleanField()
    isDeleted = serializers.BooleanField(source="is_deleted")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class StrictBooleanField(serializers.Field):
    """Accepts JSON booleans only; DRF's BooleanField also takes "yes", 1, etc."""

    default_error_messages = {"invalid": "Must be a boolean."}

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid")
        return data

    def to_representation(self, value):
        return value


class MovieCreateSerializer(serializers.Serializer):
    """Request body for POST /api/movies.

    Missing or blank values pass through; the service reports them.
    """

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    genre = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")


class MoviePatchSerializer(serializers.Serializer):
    """Request body for PATCH /api/movies/{id}. Unknown keys are ignored."""

    seen = StrictBooleanField(required=False)
    isDeleted = StrictBooleanField(required=False, source="is_deleted")


class SessionRequestSerializer(serializers.Serializer):
    """Request body for POST /api/auth/session."""

    password = serializers.CharField(trim_whitespace=False)


class SessionSerializer(serializers.Serializer):
    """Serializer for an issued SessionToken."""

    token = serializers.CharField()
    expiresAt = serializers.DateTimeField(source="expires_at")
