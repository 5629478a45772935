"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A seller listed a new product."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    seller_email: String()
    title: String(required=True)
    description: Text()
    price_amount: Float(required=True)
    price_currency: String(required=True)
    stock: Integer()
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """A seller changed a product's details, price or stock."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    changed_fields: Text(required=True)  # JSON: list of field names
    title: String()
    price_amount: Float()
    price_currency: String()
    stock: Integer()
    updated_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductDeleted:
    """A seller removed a product from the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
