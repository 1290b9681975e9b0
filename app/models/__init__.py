from app.models.ticket import Ticket
from app.models.enums import ErrorKind
