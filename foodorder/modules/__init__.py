"""
Food Order Modules
==================

Flask blueprint modules for the food order editor.
"""

__all__ = ['food_items']
