"""
Standardized API responses for TP Portal.

Every response body has the shape:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}
"""
import logging

from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.lookups.exceptions import BackingStoreUnavailable, LookupNotFound

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Format DRF and lookup cache errors as:
    {
        "status": "error",
        "message": "Error message",
        "data": field errors | null
    }

    LookupNotFound becomes 404, BackingStoreUnavailable becomes 503.
    Anything else DRF doesn't know stays unhandled (500).
    """
    if isinstance(exc, LookupNotFound):
        return error_response(str(exc), status_code=http_status.HTTP_404_NOT_FOUND)

    if isinstance(exc, BackingStoreUnavailable):
        view = context.get('view')
        logger.error(f"Lookup store unavailable in {view.__class__.__name__ if view else 'view'}: {exc}")
        return error_response(
            'Lookup data is temporarily unavailable',
            status_code=http_status.HTTP_503_SERVICE_UNAVAILABLE
        )

    response = exception_handler(exc, context)

    if response is not None:
        response.data = format_error_response(response.data, response.status_code)

    return response


def format_error_response(errors, status_code):
    """
    Flatten DRF error payloads into one message.

    - {"detail": "message"} -> "message", data None
    - {"field": ["e1", "e2"]} -> "field: e1, e2", data keeps the field errors
    - ["e1", "e2"] -> "e1, e2"
    """
    message = ""
    data = None

    if isinstance(errors, dict):
        error_messages = []
        for field, field_errors in errors.items():
            if field == 'detail':
                message = str(field_errors)
            elif isinstance(field_errors, list):
                error_messages.append(f"{field}: {', '.join(str(e) for e in field_errors)}")
            elif isinstance(field_errors, dict):
                error_messages.append(f"{field}: {format_nested_errors(field_errors)}")
            else:
                error_messages.append(f"{field}: {field_errors}")

        if error_messages:
            message = "; ".join(error_messages)
            data = {key: value for key, value in errors.items() if key != 'detail'}

    elif isinstance(errors, list):
        message = ", ".join(str(e) for e in errors)

    else:
        message = str(errors)

    return {
        "status": "error",
        "message": message,
        "data": data
    }


def format_nested_errors(errors_dict):
    messages = []
    for key, value in errors_dict.items():
        if isinstance(value, list):
            messages.append(f"{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, dict):
            messages.append(f"{key}: {format_nested_errors(value)}")
        else:
            messages.append(f"{key}: {value}")
    return "; ".join(messages)


class StandardizedJSONRenderer(JSONRenderer):
    """
    Wraps responses that views didn't already wrap (e.g. simplejwt token views).
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        if response is not None and response.status_code == 204:
            return b''

        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = {"status": "success", "message": "", "data": data}

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        return isinstance(data, dict) and {'status', 'message', 'data'} <= data.keys()


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Usage:
        return success_response(
            data=serializer.data,
            message="Lookup value created successfully",
            status_code=status.HTTP_201_CREATED
        )
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    return Response({
        "status": "error",
        "message": message,
        "data": data
    }, status=status_code)
