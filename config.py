import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///flights.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Rows fetched per round trip when streaming the full flight list
    FLIGHT_LIST_BATCH_SIZE = int(os.getenv("FLIGHT_LIST_BATCH_SIZE", 100))

    # Frontend origin(s) allowed to call the API, comma-separated
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
