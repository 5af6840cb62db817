"""
Food Item Model
===============

Schema for documents in the FoodOrder collection.
Stored documents use the keys name / Price / Quantity; all values are text.
"""

from pydantic import BaseModel, ConfigDict, Field

# Form input name -> model attribute
FORM_FIELDS = {
    'name': 'name',
    'Price': 'price',
    'Quantity': 'quantity',
}


class FoodItem(BaseModel):
    """A food order record. Price and quantity are kept as entered."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    name: str = ''
    price: str = Field('', alias='Price')
    quantity: str = Field('', alias='Quantity')

    @classmethod
    def from_document(cls, document):
        """Decode a raw store document, raising pydantic.ValidationError on bad data"""
        return cls.model_validate(document)

    def to_document(self):
        """Fields in the stored document layout"""
        return self.model_dump(by_alias=True)
