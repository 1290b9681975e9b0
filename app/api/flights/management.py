"""
Flight Management Routes
Create, read, update and delete stored flights
"""
from flask import request, current_app

from app.api.flights import flights_bp as bp, get_ticket_store
from app.utils.api_response import APIResponse
from app.utils.decorators import handle_api_error


@bp.route('/', methods=['GET'])
@handle_api_error
def list_flights():
    """Get all flights"""
    store = get_ticket_store()
    flights = [ticket.to_dict() for ticket in store.find_all()]
    return APIResponse.success(flights, message=f'Found {len(flights)} flights')


@bp.route('/', methods=['POST'])
@handle_api_error
def create_flight():
    """
    Create a new flight

    Request Body:
    {
        "airlines": "Air India",
        "name": "AI4131",
        "from": "PNQ",
        "to": "BOM",
        "date": "2020-09-05",
        "fare": 4000
    }
    """
    data = request.get_json(silent=True)
    ticket = get_ticket_store().create(data)

    current_app.logger.info(f"Flight {ticket.id} added")
    return APIResponse.success({
        'flight': ticket.to_dict()
    }, message='Flight added!', status_code=201)


@bp.route('/<flight_id>', methods=['GET'])
@handle_api_error
def get_flight(flight_id):
    """Fetch a single flight"""
    ticket = get_ticket_store().find_by_id(flight_id)
    return APIResponse.success({'flight': ticket.to_dict()})


@bp.route('/<flight_id>', methods=['DELETE'])
@handle_api_error
def delete_flight(flight_id):
    """Delete a flight"""
    get_ticket_store().delete_by_id(flight_id)

    current_app.logger.info(f"Flight {flight_id} deleted")
    return APIResponse.success(message='Flight deleted.')


@bp.route('/<flight_id>', methods=['PATCH'])
@handle_api_error
def update_flight(flight_id):
    """
    Modify an existing flight

    Only the supplied fields change, e.g. {"fare": 4500}
    """
    data = request.get_json(silent=True)
    ticket = get_ticket_store().update_by_id(flight_id, data)

    current_app.logger.info(f"Flight {flight_id} updated")
    return APIResponse.success({
        'flight': ticket.to_dict()
    }, message='Flight updated!')
