"""
Food Item Editor
================

Form state and actions behind the edit page.

One editor is built per request: it takes the item id from the URL,
loads the record, applies submitted input values and runs Update or
Delete against the injected store. On success it records where to
navigate next; the route turns that into a redirect.
"""

from ...core.logging_service import LoggingService
from .models import FORM_FIELDS, FoodItem

SOURCE = 'food_items'

FETCH_ERROR = "Error fetching data"
UPDATE_ERROR = "Error updating food item"
DELETE_ERROR = "Error deleting food item"
UPDATE_SUCCESS = "Food item updated successfully"
DELETE_SUCCESS = "Food item deleted successfully"

# Editor states
INITIAL = 'initial'
LOADING = 'loading'
LOADED = 'loaded'
LOAD_ERROR = 'load-error'
UPDATING = 'updating'
DELETING = 'deleting'
NAVIGATED = 'navigated'
MUTATION_ERROR = 'mutation-error'


class EditFoodItem:
    """Binds one FoodOrder document to an editable form."""

    def __init__(self, store, item_id, listing_url, collection='FoodOrder', notify=None):
        """
        Args:
            store: DocumentStore handle
            item_id: Document key from the URL; empty means not resolved yet
            listing_url: Where to go after a successful update or delete
            collection: Collection holding the food items
            notify: Callable receiving confirmation messages (flash)
        """
        self.store = store
        self.item_id = item_id or ''
        self.listing_url = listing_url
        self.collection = collection
        self.notify = notify

        self.item = FoodItem()
        self.error = None
        self.status = INITIAL
        self.redirect_url = None

    def load(self):
        """Fetch the record once. Returns True if the form was populated."""
        if not self.item_id:
            return False

        self.status = LOADING
        try:
            document = self.store.get(self.collection, self.item_id)
            if document is None:
                LoggingService.info(SOURCE, "No document found!", {'id': self.item_id})
                self.status = LOADED
                return False

            self.item = FoodItem.from_document(document)
            self.status = LOADED
            return True

        except Exception as e:
            LoggingService.log_error_with_traceback(SOURCE, e, {'id': self.item_id})
            self.error = FETCH_ERROR
            self.status = LOAD_ERROR
            return False

    def set_field(self, name, value):
        """Set one field by form input name or attribute name; others are untouched"""
        attribute = FORM_FIELDS.get(name, name)
        if attribute not in FORM_FIELDS.values():
            raise KeyError(name)
        self.item = self.item.model_copy(update={attribute: value})

    def apply_form(self, form):
        """Copy submitted input values onto the form state"""
        for input_name in FORM_FIELDS:
            if input_name in form:
                self.set_field(input_name, form[input_name])

    def update(self):
        """Write the three current values as a partial update"""
        if not self.item_id:
            return False

        self.status = UPDATING
        try:
            self.store.update(self.collection, self.item_id, self.item.to_document())
        except Exception as e:
            LoggingService.error(SOURCE, f"Error updating food item: {e}", {'id': self.item_id})
            self.error = UPDATE_ERROR
            self.status = MUTATION_ERROR
            return False

        LoggingService.info(SOURCE, "Food item updated", {'id': self.item_id})
        self._finish(UPDATE_SUCCESS)
        return True

    def delete(self):
        """Remove the record from the store"""
        if not self.item_id:
            return False

        self.status = DELETING
        try:
            self.store.delete(self.collection, self.item_id)
        except Exception as e:
            LoggingService.error(SOURCE, f"Error deleting food item: {e}", {'id': self.item_id})
            self.error = DELETE_ERROR
            self.status = MUTATION_ERROR
            return False

        LoggingService.info(SOURCE, "Food item deleted", {'id': self.item_id})
        self._finish(DELETE_SUCCESS)
        return True

    def _finish(self, message):
        if self.notify:
            self.notify(message)
        self.redirect_url = self.listing_url
        self.status = NAVIGATED
