import uuid
from app.extensions import db

class Ticket(db.Model):
    __tablename__ = 'tickets'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    airlines = db.Column(db.String(100), nullable=False)
    name = db.Column(db.String(50), nullable=False)  # flight number, e.g. AI4131

    # Route
    origin = db.Column('from', db.String(100), nullable=False, index=True)
    destination = db.Column('to', db.String(100), nullable=False, index=True)

    # Departure, naive UTC
    date = db.Column(db.DateTime, nullable=False, index=True)
    fare = db.Column(db.Numeric(10, 2), nullable=False)

    # Wire name -> attribute
    FIELD_MAP = {
        'airlines': 'airlines',
        'name': 'name',
        'from': 'origin',
        'to': 'destination',
        'date': 'date',
        'fare': 'fare',
    }

    def apply(self, fields):
        """Set attributes from a cleaned, wire-keyed dict"""
        for key, value in fields.items():
            setattr(self, self.FIELD_MAP[key], value)

    def to_dict(self):
        return {
            'id': self.id,
            'airlines': self.airlines,
            'name': self.name,
            'from': self.origin,
            'to': self.destination,
            'date': self.date.isoformat() + 'Z' if self.date else None,
            'fare': float(self.fare) if self.fare is not None else None
        }

    def __repr__(self):
        return f'<Ticket {self.name} {self.origin}->{self.destination} {self.date}>'
