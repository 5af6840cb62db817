"""
Food Items Routes
=================

Edit page, listing page and JSON API over the FoodOrder collection.
The document store comes from the FoodOrder extension on the app.
"""

from flask import current_app, flash, jsonify, redirect, render_template, request, url_for
from pydantic import ValidationError

from ...core.logging_service import LoggingService
from ...core.store import DocumentNotFoundError, StoreError
from . import food_items_api_bp, food_items_bp, food_single_bp
from .editor import FETCH_ERROR, SOURCE, EditFoodItem
from .models import FORM_FIELDS, FoodItem

# ===== Helpers =====

def get_store():
    """Process-wide store handle owned by the FoodOrder extension"""
    return current_app.extensions['foodorder'].store


def get_collection():
    return current_app.config.get('FOOD_COLLECTION', 'FoodOrder')


def serialize_item(item_id, item):
    return {'id': item_id, **item.to_document()}


def load_items():
    """Decode every record in the collection, skipping ones that don't fit the schema"""
    items = []
    for item_id, document in get_store().list(get_collection()):
        try:
            items.append((item_id, FoodItem.from_document(document)))
        except ValidationError as e:
            LoggingService.warning(SOURCE, f"Skipping undecodable document {item_id}", {'error': str(e)})
    return items


# ===== Edit Page =====

@food_single_bp.route('/<slug>/', defaults={'item_id': ''}, methods=['GET', 'POST'])
@food_single_bp.route('/<slug>/<item_id>', methods=['GET', 'POST'])
def edit_food_item(slug, item_id):
    """Edit form for one food item"""
    editor = EditFoodItem(
        get_store(),
        item_id,
        listing_url=url_for('food_items.list_food_items'),
        collection=get_collection(),
        notify=lambda message: flash(message, 'success'),
    )

    if request.method == 'POST':
        action = request.form.get('action')
        if action == 'update':
            # Inputs left out of the POST keep their stored values
            editor.load()
        editor.apply_form(request.form)

        if action == 'update':
            if editor.error is None:
                editor.update()
        elif action == 'delete':
            editor.delete()
        else:
            LoggingService.warning(SOURCE, f"Unknown form action: {action}", {'id': item_id})

        if editor.redirect_url:
            return redirect(editor.redirect_url)
    else:
        editor.load()

    return render_template(
        'food_items/edit.html',
        editor=editor,
        item=editor.item,
        error=editor.error,
        slug=slug,
    )


# ===== Listing Page =====

@food_items_bp.route('')
def list_food_items():
    """All food items with links to their edit pages"""
    error = None
    try:
        items = load_items()
    except StoreError as e:
        LoggingService.error(SOURCE, f"Error listing food items: {e}")
        items = []
        error = FETCH_ERROR

    return render_template('food_items/list.html', items=items, error=error)


# ===== JSON API =====

@food_items_api_bp.route('')
def api_list_items():
    """List food items"""
    try:
        items = load_items()
    except StoreError as e:
        LoggingService.error(SOURCE, f"Error listing food items: {e}")
        return jsonify({'success': False, 'error': str(e)}), 500

    return jsonify({
        'success': True,
        'items': [serialize_item(item_id, item) for item_id, item in items]
    })


@food_items_api_bp.route('/<item_id>')
def api_get_item(item_id):
    """Get one food item"""
    try:
        document = get_store().get(get_collection(), item_id)
        if document is None:
            return jsonify({'success': False, 'error': 'Food item not found'}), 404
        item = FoodItem.from_document(document)
    except (StoreError, ValidationError) as e:
        LoggingService.error(SOURCE, f"Error getting food item: {e}", {'id': item_id})
        return jsonify({'success': False, 'error': str(e)}), 500

    return jsonify({'success': True, 'item': serialize_item(item_id, item)})


@food_items_api_bp.route('/<item_id>', methods=['PATCH'])
def api_update_item(item_id):
    """Partial update of a food item"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'JSON object required'}), 400

    # Accept both document keys (Price) and attribute names (price)
    attribute_to_key = {attribute: key for key, attribute in FORM_FIELDS.items()}
    fields = {}
    for name, value in data.items():
        key = name if name in FORM_FIELDS else attribute_to_key.get(name)
        if key:
            fields[key] = value

    if not fields:
        return jsonify({'success': False, 'error': 'No fields to update'}), 400

    try:
        FoodItem.from_document({**FoodItem().to_document(), **fields})
    except ValidationError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    try:
        get_store().update(get_collection(), item_id, fields)
    except DocumentNotFoundError:
        return jsonify({'success': False, 'error': 'Food item not found'}), 404
    except StoreError as e:
        LoggingService.error(SOURCE, f"Error updating food item: {e}", {'id': item_id})
        return jsonify({'success': False, 'error': str(e)}), 500

    LoggingService.info(SOURCE, "Food item updated via API", {'id': item_id, 'fields': list(fields)})
    return jsonify({'success': True, 'message': f'Food item {item_id} updated successfully'})


@food_items_api_bp.route('/<item_id>', methods=['DELETE'])
def api_delete_item(item_id):
    """Delete a food item"""
    try:
        get_store().delete(get_collection(), item_id)
    except StoreError as e:
        LoggingService.error(SOURCE, f"Error deleting food item: {e}", {'id': item_id})
        return jsonify({'success': False, 'error': str(e)}), 500

    LoggingService.info(SOURCE, "Food item deleted via API", {'id': item_id})
    return jsonify({'success': True, 'message': f'Food item {item_id} deleted successfully'})
