"""
Food Items Module
=================

Edit page, listing page and JSON API for FoodOrder records.

Provides:
- Edit form for one record (/FoodSingle/<slug>/<item_id>) with Update and Delete
- Listing page the edit form redirects to (/GetFoodItems)
- JSON API for the same records (/api/food-items)
"""

from flask import Blueprint

# Edit page for a single record
food_single_bp = Blueprint(
    'food_single',
    __name__,
    url_prefix='/FoodSingle',
    template_folder='templates'
)

# Listing page
food_items_bp = Blueprint(
    'food_items',
    __name__,
    url_prefix='/GetFoodItems',
    template_folder='templates'
)

# JSON API
food_items_api_bp = Blueprint(
    'food_items_api',
    __name__,
    url_prefix='/api/food-items'
)

from . import routes

__all__ = ['food_single_bp', 'food_items_bp', 'food_items_api_bp']
