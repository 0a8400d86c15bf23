# teamassist/exceptions.py
import logging

from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class AppException(exceptions.APIException):
    """Base class for errors raised by the service layer."""
    error_code = 'INTERNAL_SERVER_ERROR'


class NotFoundException(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found'
    default_code = 'not_found'
    error_code = 'RESOURCE_NOT_FOUND'


class BadRequestException(AppException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request'
    default_code = 'bad_request'
    error_code = 'BAD_REQUEST'


class UnauthorizedException(AppException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You are not authorized to perform this action'
    default_code = 'unauthorized'
    error_code = 'ACCESS_UNAUTHORIZED'


STATUS_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: 'BAD_REQUEST',
    status.HTTP_401_UNAUTHORIZED: 'AUTH_REQUIRED',
    status.HTTP_403_FORBIDDEN: 'ACCESS_UNAUTHORIZED',
    status.HTTP_404_NOT_FOUND: 'RESOURCE_NOT_FOUND',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'METHOD_NOT_ALLOWED',
}


def _error_code(exc, status_code):
    if isinstance(exc, AppException):
        return exc.error_code
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return 'AUTH_REQUIRED'
    return STATUS_ERROR_CODES.get(status_code, 'INTERNAL_SERVER_ERROR')


def api_exception_handler(exc, context):
    """
    Render every API error as {"message": ..., "error_code": ...}.
    Validation errors keep DRF's field map under "errors".
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown view'

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            'message': 'Validation failed',
            'error_code': 'VALIDATION_ERROR',
            'errors': response.data,
        }
        logger.warning(f"Validation failed in {view_name}: {response.data['errors']} at {timezone.now()}")
        return response

    detail = response.data.get('detail') if isinstance(response.data, dict) else response.data
    response.data = {
        'message': str(detail),
        'error_code': _error_code(exc, response.status_code),
    }
    logger.warning(f"{view_name} failed with {response.status_code}: {detail} at {timezone.now()}")
    return response
