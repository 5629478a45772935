"""Turn cart lines and current product records into priced order lines."""

from protean.exceptions import ValidationError

from ordering.clients.port import CartLine, ProductSnapshot


def distinct_product_ids(lines: list[CartLine]) -> list[str]:
    return list(dict.fromkeys(line.product_id for line in lines))


def price_cart(lines: list[CartLine], products: dict[str, ProductSnapshot]) -> tuple[list[dict], str]:
    """Validate stock for every line and freeze its current unit price.

    Returns ``(priced_lines, currency)``. The whole cart is rejected if any
    line is short on stock or if the products are priced in more than one
    currency.
    """
    if not lines:
        raise ValidationError({"cart": ["Cart is empty"]})

    priced = []
    currencies = set()
    for line in lines:
        product = products.get(line.product_id)
        if product is None:
            raise ValidationError({"items": [f"Product {line.product_id} not found"]})
        if product.stock < line.quantity:
            raise ValidationError({"items": [f"Product {product.title} is out of stock or insufficient quantity"]})

        currencies.add(product.price_currency)
        priced.append(
            {
                "product_id": line.product_id,
                "title": product.title,
                "quantity": line.quantity,
                "unit_price": product.price_amount,
            }
        )

    if len(currencies) > 1:
        raise ValidationError({"items": ["All items in an order must be priced in the same currency"]})

    return priced, currencies.pop()


def order_total(priced_lines: list[dict]) -> float:
    return round(sum(line["unit_price"] * line["quantity"] for line in priced_lines), 2)
