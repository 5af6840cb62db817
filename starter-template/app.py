"""
Food Order Starter Template
===========================

A ready-to-run Flask application with the food order pages enabled.

Run with:
    python app.py

Visit:
    http://localhost:5000/GetFoodItems               - Listing page
    http://localhost:5000/FoodSingle/item/abc123     - Edit page
"""

import os
from flask import Flask, redirect, url_for

from config import Config
from foodorder import FoodOrder

# ===== App Setup =====

app = Flask(__name__)
app.config['SECRET_KEY'] = Config.SECRET_KEY
app.config['BRAND_NAME'] = Config.BRAND_NAME
app.config['DB_DIR'] = Config.DB_DIR
app.config['DOCUMENTS_DB'] = Config.DOCUMENTS_DB
app.config['LOGS_DB'] = Config.LOGS_DB
app.config['STORE_BACKEND'] = Config.STORE_BACKEND

# Ensure database directory exists
os.makedirs(Config.DB_DIR, exist_ok=True)

# ===== Food Order Extension =====

food_order = FoodOrder(app)


def seed_sample_items():
    """Write the sample records if the collection is empty"""
    store = food_order.store
    collection = app.config['FOOD_COLLECTION']
    if store.list(collection):
        return
    for item_id, fields in Config.SAMPLE_ITEMS.items():
        store.set(collection, item_id, fields)
    print(f"[STARTER] Seeded {len(Config.SAMPLE_ITEMS)} sample food items")


# ===== Routes =====

@app.route('/')
def home():
    """Send visitors to the listing page"""
    return redirect(url_for('food_items.list_food_items'))


# ===== Run =====

if __name__ == '__main__':
    seed_sample_items()
    print("[STARTER] Starting on port 5000...")
    app.run(debug=True, port=5000, host='0.0.0.0')
