"""
Ticket Store
Durable storage and retrieval of flight records

The store is constructed with the Flask-SQLAlchemy handle and injected into
the application by the app factory. Every failure surfaces as a
TicketStoreError subclass carrying an ErrorKind, which the HTTP layer maps
to a status code.
"""
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Iterator, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from app.models.enums import ErrorKind
from app.models.ticket import Ticket
from app.utils.validation import FlightValidator

logger = logging.getLogger(__name__)

SEARCH_WINDOW = timedelta(hours=24)


def window_end(start: datetime) -> datetime:
    """End of the search window opened at start, capped at datetime.max"""
    try:
        return start + SEARCH_WINDOW
    except OverflowError:
        return datetime.max


class TicketStoreError(Exception):
    """Base exception for ticket store failures"""
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class TicketValidationError(TicketStoreError):
    """Raised when a record is missing fields or has wrong types"""
    kind = ErrorKind.VALIDATION


class TicketNotFoundError(TicketStoreError):
    """Raised when no ticket has the requested id"""
    kind = ErrorKind.NOT_FOUND


class TicketStore:
    """
    Persistence operations for flight tickets

    Writes commit on success and roll the session back on any database
    error. Concurrent writers to the same ticket are last-write-wins.
    """

    def __init__(self, db, batch_size: int = 100):
        self._db = db
        self.batch_size = batch_size

    @property
    def session(self):
        return self._db.session

    # ==================== WRITES ====================

    def create(self, data: Dict[str, Any]) -> Ticket:
        """Validate and insert a new ticket, returning it with its generated id"""
        is_valid, errors, cleaned_data = FlightValidator.validate_create(data)
        if not is_valid:
            raise TicketValidationError('Invalid flight data', details=errors)

        ticket = Ticket()
        ticket.apply(cleaned_data)
        self.session.add(ticket)
        self._commit('create ticket')

        logger.info(f"Created ticket {ticket.id} ({ticket.name} {ticket.origin}->{ticket.destination})")
        return ticket

    def update_by_id(self, ticket_id: str, fields: Dict[str, Any]) -> Ticket:
        """Merge the supplied fields into an existing ticket"""
        ticket = self.find_by_id(ticket_id)

        is_valid, errors, cleaned_data = FlightValidator.validate_update(fields)
        if not is_valid:
            raise TicketValidationError('Invalid flight data', details=errors)

        ticket.apply(cleaned_data)
        self._commit(f'update ticket {ticket_id}')

        logger.info(f"Updated ticket {ticket_id}: {sorted(cleaned_data)}")
        return ticket

    def delete_by_id(self, ticket_id: str) -> None:
        ticket = self.find_by_id(ticket_id)
        self.session.delete(ticket)
        self._commit(f'delete ticket {ticket_id}')
        logger.info(f"Deleted ticket {ticket_id}")

    def load_many(self, records: List[Dict[str, Any]],
                  clear_existing: bool = False) -> Tuple[int, int, List[str]]:
        """
        Insert a batch of records, skipping the invalid ones

        Args:
            records: Flight payloads keyed by wire field names
            clear_existing: Delete every stored ticket first

        Returns:
            Tuple of (created, failed, error_messages)
        """
        if clear_existing:
            try:
                removed = self.session.query(Ticket).delete()
            except SQLAlchemyError as e:
                self.session.rollback()
                logger.error(f"Failed to clear tickets: {str(e)}")
                raise TicketStoreError('Failed to clear tickets') from e
            self._commit('clear tickets')
            logger.info(f"Cleared {removed} existing tickets")

        created = 0
        error_list = []
        for index, record in enumerate(records):
            try:
                self.create(record)
                created += 1
            except TicketValidationError as e:
                label = record.get('name', f'#{index}') if isinstance(record, dict) else f'#{index}'
                error_list.append(f"{label}: {e.details}")

        return created, len(error_list), error_list

    # ==================== READS ====================

    def find_all(self) -> Iterator[Ticket]:
        """Lazily stream every ticket in batches; no ordering guarantee"""
        query = self.session.query(Ticket).yield_per(self.batch_size)
        try:
            for ticket in query:
                yield ticket
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to list tickets: {str(e)}")
            raise TicketStoreError('Failed to list tickets') from e

    def find_by_id(self, ticket_id: str) -> Ticket:
        try:
            ticket = self.session.get(Ticket, ticket_id)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to fetch ticket {ticket_id}: {str(e)}")
            raise TicketStoreError('Failed to fetch ticket') from e

        if ticket is None:
            logger.info(f"Ticket {ticket_id} not found")
            raise TicketNotFoundError(f'Flight {ticket_id} not found')
        return ticket

    def find_by_range(self, origin: str, destination: str, start: Any,
                      end: Any = None) -> List[Ticket]:
        """
        Tickets on an exact route departing within [start, end)

        Args:
            origin: Origin code, matched exactly after upper-casing
            destination: Destination code, matched the same way
            start: Window start (datetime, date or parseable string)
            end: Window end; defaults to start + 24 hours
        """
        errors = {}
        if not isinstance(origin, str) or not origin.strip():
            errors['from'] = 'from is required'
        if not isinstance(destination, str) or not destination.strip():
            errors['to'] = 'to is required'

        start_at = FlightValidator.parse_datetime(start)
        if start_at is None:
            errors['date'] = 'date must be a valid date or date-time (e.g. 2020-09-05)'

        end_at = None
        if end is not None:
            end_at = FlightValidator.parse_datetime(end)
            if end_at is None:
                errors['end'] = 'end must be a valid date or date-time'
        elif start_at is not None:
            end_at = window_end(start_at)

        if errors:
            raise TicketValidationError('Invalid search parameters', details=errors)

        origin = origin.strip().upper()
        destination = destination.strip().upper()
        logger.info(f"Searching tickets {origin} -> {destination} in [{start_at}, {end_at})")

        try:
            return self.session.query(Ticket).filter(
                Ticket.origin == origin,
                Ticket.destination == destination,
                Ticket.date >= start_at,
                Ticket.date < end_at
            ).all()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Ticket search failed: {str(e)}")
            raise TicketStoreError('Failed to search tickets') from e

    def search(self, origin: str, destination: str, day: Any) -> List[Ticket]:
        """Tickets on an exact route during the UTC calendar day containing day"""
        day_at = FlightValidator.parse_datetime(day)
        if day_at is None:
            raise TicketValidationError(
                'Invalid search parameters',
                details={'date': 'date must be a valid date or date-time (e.g. 2020-09-05)'}
            )
        start_at = FlightValidator.start_of_day(day_at)
        return self.find_by_range(origin, destination, start_at, window_end(start_at))

    def count(self) -> int:
        try:
            return self.session.query(Ticket).count()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to count tickets: {str(e)}")
            raise TicketStoreError('Failed to count tickets') from e

    # ==================== HELPERS ====================

    def _commit(self, action: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to {action}: {str(e)}")
            raise TicketStoreError(f'Failed to {action}') from e
