"""
Flight record validation
Checks and normalizes flight payloads before they reach the database
"""
from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Tuple

from dateutil import parser


class FlightValidator:
    """Validation helpers for flight records"""

    REQUIRED_FIELDS = ('airlines', 'name', 'from', 'to', 'date', 'fare')

    # Wire field -> max length
    TEXT_FIELDS = {
        'airlines': 100,
        'name': 50,
        'from': 100,
        'to': 100,
    }

    # Route codes are compared exactly, so they are stored in one case
    UPPERCASE_FIELDS = ('from', 'to')

    # Fits the Numeric(10, 2) column
    MAX_FARE = Decimal('100000000')
    FARE_STEP = Decimal('0.01')

    @staticmethod
    def validate_create(data: Dict[str, Any]) -> Tuple[bool, Dict[str, str], Dict[str, Any]]:
        """
        Validate a new flight record

        Args:
            data: Request payload keyed by wire field names

        Returns:
            Tuple of (is_valid, errors, cleaned_data)
        """
        if not isinstance(data, dict):
            return False, {'body': 'Request body must be a JSON object'}, {}

        errors = {}
        cleaned_data = {}

        for field in FlightValidator.REQUIRED_FIELDS:
            value = data.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors[field] = f'{field} is required'
                continue
            error, cleaned = FlightValidator._clean_field(field, value)
            if error:
                errors[field] = error
            else:
                cleaned_data[field] = cleaned

        return len(errors) == 0, errors, cleaned_data

    @staticmethod
    def validate_update(data: Dict[str, Any]) -> Tuple[bool, Dict[str, str], Dict[str, Any]]:
        """
        Validate a partial flight update

        Only known fields are considered; unknown keys are dropped. A known
        field that is present must still satisfy the create rules.
        """
        if not isinstance(data, dict):
            return False, {'body': 'Request body must be a JSON object'}, {}

        errors = {}
        cleaned_data = {}

        for field in FlightValidator.REQUIRED_FIELDS:
            if field not in data:
                continue
            value = data[field]
            if value is None or (isinstance(value, str) and not value.strip()):
                errors[field] = f'{field} cannot be empty'
                continue
            error, cleaned = FlightValidator._clean_field(field, value)
            if error:
                errors[field] = error
            else:
                cleaned_data[field] = cleaned

        return len(errors) == 0, errors, cleaned_data

    @staticmethod
    def validate_search(data: Dict[str, Any]) -> Tuple[bool, Dict[str, str], Dict[str, Any]]:
        """Validate a route/day search request"""
        if not isinstance(data, dict):
            return False, {'body': 'Request body must be a JSON object'}, {}

        errors = {}
        cleaned_data = {}

        for field in ('from', 'to', 'date'):
            value = data.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors[field] = f'{field} is required'
                continue
            error, cleaned = FlightValidator._clean_field(field, value)
            if error:
                errors[field] = error
            else:
                cleaned_data[field] = cleaned

        return len(errors) == 0, errors, cleaned_data

    @staticmethod
    def parse_datetime(value: Any) -> Optional[datetime]:
        """
        Parse a date or date-time into a naive UTC datetime

        Aware values are converted to UTC; naive values are taken as UTC.
        Returns None when the value cannot be parsed.
        """
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time.min)
        elif isinstance(value, str):
            try:
                parsed = parser.parse(value.strip())
            except (ValueError, OverflowError):
                return None
        else:
            return None

        if parsed.tzinfo is not None:
            try:
                parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
            except OverflowError:
                return None
        return parsed

    @staticmethod
    def start_of_day(value: datetime) -> datetime:
        """Midnight of the calendar day containing value"""
        return datetime.combine(value.date(), time.min)

    @staticmethod
    def _clean_field(field: str, value: Any) -> Tuple[Optional[str], Any]:
        """Return (error, cleaned_value) for a single non-empty field"""
        if field in FlightValidator.TEXT_FIELDS:
            if not isinstance(value, str):
                return f'{field} must be a string', None
            text = value.strip()
            max_length = FlightValidator.TEXT_FIELDS[field]
            if len(text) > max_length:
                return f'{field} must be at most {max_length} characters', None
            if field in FlightValidator.UPPERCASE_FIELDS:
                text = text.upper()
            return None, text

        if field == 'date':
            parsed = FlightValidator.parse_datetime(value)
            if parsed is None:
                return 'date must be a valid date or date-time (e.g. 2020-09-05)', None
            return None, parsed

        if field == 'fare':
            return FlightValidator._clean_fare(value)

        return f'Unknown field {field}', None

    @staticmethod
    def _clean_fare(value: Any) -> Tuple[Optional[str], Optional[Decimal]]:
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
            return 'fare must be a number', None
        try:
            fare = Decimal(str(value).strip())
        except InvalidOperation:
            return 'fare must be a number', None
        if not fare.is_finite():
            return 'fare must be a finite number', None
        if fare < 0:
            return 'fare cannot be negative', None
        if fare >= FlightValidator.MAX_FARE:
            return f'fare must be less than {FlightValidator.MAX_FARE}', None
        if fare != fare.quantize(FlightValidator.FARE_STEP):
            return 'fare cannot have more than two decimal places', None
        return None, fare
