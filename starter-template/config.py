import os
from dotenv import load_dotenv

load_dotenv()

DB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'databases')


class Config:
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    BRAND_NAME = 'My Food Orders'

    # Database paths
    DB_DIR = DB_DIR
    DOCUMENTS_DB = os.path.join(DB_DIR, 'documents.db')
    LOGS_DB = os.path.join(DB_DIR, 'app_logs.db')

    # Document store ("sqlite" or "dynamodb")
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'sqlite')
    # DYNAMODB_TABLE = os.getenv('DYNAMODB_TABLE', 'food-orders')   # if dynamodb
    # DYNAMODB_ENDPOINT_URL = 'http://localhost:8000'              # DynamoDB Local

    # Sample records written on first start
    SAMPLE_ITEMS = {
        'abc123': {'name': 'Pizza', 'Price': '10', 'Quantity': '2'},
        'def456': {'name': 'Pad Thai', 'Price': '12', 'Quantity': '1'},
    }
