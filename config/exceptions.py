"""
DRF exception handler.

Normalizes every error response to carry a string ``error`` key, which is
what the mobile client displays. Field-level validation errors are kept
under ``details``.
"""
from rest_framework.views import exception_handler


def _first_message(detail):
    """Dig the first human-readable message out of a DRF error structure."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _first_message(value)
            if key in ('detail', 'non_field_errors'):
                return message
            return f"{key}: {message}"
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and set(data) == {'detail'}:
        response.data = {'error': str(data['detail'])}
    else:
        response.data = {
            'error': _first_message(data),
            'details': data,
        }
    return response
