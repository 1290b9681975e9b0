from enum import Enum


class ErrorKind(Enum):
    """Failure categories raised by the ticket store"""
    VALIDATION = 'VALIDATION_ERROR'
    NOT_FOUND = 'NOT_FOUND'
    INTERNAL = 'INTERNAL_ERROR'
