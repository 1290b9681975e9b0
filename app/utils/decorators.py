from functools import wraps
import logging

from app.models.enums import ErrorKind
from app.services.ticket_store import TicketStoreError
from app.utils.api_response import APIResponse

logger = logging.getLogger(__name__)


def handle_api_error(f):
    """Translate ticket store error kinds into HTTP responses"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except TicketStoreError as e:
            if e.kind is ErrorKind.VALIDATION:
                logger.warning(f"Validation error: {e.message} {e.details}")
                return APIResponse.validation_error(e.details, message=e.message)
            if e.kind is ErrorKind.NOT_FOUND:
                return APIResponse.not_found(e.message)
            logger.error(f"Ticket store error: {e.message}")
            return APIResponse.internal_error(e.message)
        except Exception:
            logger.exception("Unexpected error in API endpoint")
            return APIResponse.internal_error()
    return decorated_function
