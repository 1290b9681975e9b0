from flask import request

from app.api.flights import flights_bp as bp, get_ticket_store
from app.services.ticket_store import TicketValidationError
from app.utils.api_response import APIResponse
from app.utils.decorators import handle_api_error
from app.utils.validation import FlightValidator


@bp.route('/search', methods=['POST'])
@handle_api_error
def search_flights():
    """
    Search flights on a route for one day

    Request Body:
    {
        "from": "PNQ",
        "to": "BOM",
        "date": "2020-09-05"
    }

    Matches flights departing on the UTC calendar day of `date`; any time
    component is ignored.
    """
    data = request.get_json(silent=True)

    is_valid, errors, cleaned_data = FlightValidator.validate_search(data)
    if not is_valid:
        raise TicketValidationError('Invalid search parameters', details=errors)

    tickets = get_ticket_store().search(
        cleaned_data['from'],
        cleaned_data['to'],
        cleaned_data['date']
    )
    flights = [ticket.to_dict() for ticket in tickets]
    return APIResponse.success(flights, message=f'Found {len(flights)} flights')
