import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for the food order editor.
    Projects should provide database paths via environment variables.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    BRAND_NAME = os.getenv('BRAND_NAME', 'Food Orders')

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))

    # Database paths - use environment variables or fallback to DB_DIR
    DOCUMENTS_DB = os.getenv('DOCUMENTS_DB', os.path.join(DB_DIR, "documents.db"))
    LOGS_DB = os.getenv('LOGS_DB', os.path.join(DB_DIR, "app_logs.db"))

    # Document store backend: "sqlite" (local file) or "dynamodb"
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'sqlite')

    # DynamoDB settings (only read when STORE_BACKEND=dynamodb)
    DYNAMODB_TABLE = os.getenv('DYNAMODB_TABLE', 'food-orders')
    AWS_REGION = os.getenv('AWS_REGION', 'us-east-1')
    DYNAMODB_ENDPOINT_URL = os.getenv('DYNAMODB_ENDPOINT_URL')

    # Collection / table names
    FOOD_COLLECTION = os.getenv('FOOD_COLLECTION', 'FoodOrder')
    DOCUMENTS_TABLE = "documents"
    LOGS_TABLE = "app_logs"

