"""
Flight API Blueprint
CRUD and route/day search over stored flights
"""
from flask import Blueprint, current_app

flights_bp = Blueprint('flights', __name__, url_prefix='/flights')


def get_ticket_store():
    """Ticket store injected by the app factory"""
    return current_app.extensions['ticket_store']


# Import routes after blueprint creation to avoid circular imports
from . import management, search
