"""DRF exception handler keeping error bodies in the ``{"error": ...}`` shape."""

from rest_framework.views import exception_handler


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None
    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {"error": str(detail) if detail is not None else "Invalid request"}
    return response
