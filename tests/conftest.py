import pytest
from app import create_app
from app.extensions import db as _db
from config import Config

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'
    FLIGHT_LIST_BATCH_SIZE = 2

@pytest.fixture
def app():
    app = create_app(TestConfig)

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def runner(app):
    return app.test_cli_runner()

@pytest.fixture
def db(app):
    return _db

@pytest.fixture
def store(app):
    return app.extensions['ticket_store']

@pytest.fixture
def flight_payload():
    return {
        'airlines': 'Air India',
        'name': 'AI4131',
        'from': 'PNQ',
        'to': 'BOM',
        'date': '2020-09-05',
        'fare': 4000
    }
