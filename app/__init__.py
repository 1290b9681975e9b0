import logging

from flask import Flask
from flask_cors import CORS

from app.extensions import db, migrate
from config import Config


def create_app(config_class=Config, ticket_store=None):
    """
    Build the Flask application

    Args:
        config_class: Configuration object loaded into app.config
        ticket_store: Store handle for flight records; a TicketStore bound
            to the app's database is built when omitted
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    CORS(app, origins=cors_origins(app.config.get('CORS_ORIGINS', '*')))

    from app import models  # noqa: F401  registers tables with the metadata

    if ticket_store is None:
        from app.services.ticket_store import TicketStore
        ticket_store = TicketStore(db, batch_size=app.config.get('FLIGHT_LIST_BATCH_SIZE', 100))
    app.extensions['ticket_store'] = ticket_store

    # Register Blueprint
    from app.api.flights import flights_bp
    app.register_blueprint(flights_bp)

    from app.db_init.cli import register_commands
    register_commands(app)

    return app


def cors_origins(value):
    """Comma-separated origins become a list; a single origin or '*' passes through"""
    if isinstance(value, str) and ',' in value:
        return [origin.strip() for origin in value.split(',') if origin.strip()]
    return value


def configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    app.logger.setLevel(level)
