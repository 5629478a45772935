"""Product aggregate root with ProductImage entity and Price value object."""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject
from protean.utils.query import Q

from catalogue.domain import catalogue
from catalogue.product.events import ProductCreated, ProductDeleted, ProductUpdated

MAX_IMAGES = 5
MAX_PAGE_SIZE = 20

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class Currency(Enum):
    """Currencies a product can be priced in."""

    USD = "USD"
    INR = "INR"


@catalogue.value_object(part_of="Product")
class Price:
    """Amount and currency. The amount is always strictly positive."""

    amount: Float(required=True)
    currency: String(max_length=3, choices=Currency, default=Currency.INR.value)

    @invariant.post
    def amount_must_be_positive(self):
        if self.amount is None or self.amount <= 0:
            raise ValidationError({"price_amount": ["Price amount must be a positive number greater than 0"]})


@catalogue.entity(part_of="Product")
class ProductImage:
    """An image stored in the image store, referenced by URL."""

    url: String(required=True, max_length=1000)
    thumbnail: String(max_length=1000)
    file_id: String(max_length=255)


@catalogue.aggregate
class Product:
    """A product listed by a seller, with its price, stock level and images."""

    title: String(required=True, max_length=255)
    description: String(max_length=2000, default="")
    price: ValueObject(Price, required=True)
    seller_id: Identifier(required=True)
    images: HasMany(ProductImage)
    stock: Integer(default=0, min_value=0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def images_cannot_exceed_maximum(self):
        if len(self.images) > MAX_IMAGES:
            raise ValidationError({"images": [f"A product can have at most {MAX_IMAGES} images"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        seller_id,
        title,
        price_amount,
        price_currency=Currency.INR.value,
        description="",
        stock=0,
        images=None,
        seller_email=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            seller_id=seller_id,
            title=title.strip() if title else title,
            description=(description or "").strip(),
            price=Price(amount=price_amount, currency=price_currency or Currency.INR.value),
            stock=stock or 0,
            created_at=now,
            updated_at=now,
        )
        for image in images or []:
            product.add_images(
                ProductImage(url=image["url"], thumbnail=image.get("thumbnail"), file_id=image.get("file_id"))
            )

        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                seller_id=str(seller_id),
                seller_email=seller_email,
                title=product.title,
                description=product.description,
                price_amount=product.price.amount,
                price_currency=product.price.currency,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def is_owned_by(self, seller_id) -> bool:
        return str(self.seller_id) == str(seller_id)

    def update_details(
        self,
        title=_UNSET,
        description=_UNSET,
        price_amount=_UNSET,
        price_currency=_UNSET,
        stock=_UNSET,
    ):
        """Apply a partial update. Omitted arguments keep their current value."""
        changed = []

        if title is not _UNSET and title != self.title:
            self.title = title.strip() if title else title
            changed.append("title")

        if description is not _UNSET and description != self.description:
            self.description = (description or "").strip()
            changed.append("description")

        if price_amount is not _UNSET or price_currency is not _UNSET:
            new_amount = price_amount if price_amount is not _UNSET else self.price.amount
            new_currency = price_currency if price_currency is not _UNSET else self.price.currency
            if new_amount != self.price.amount or new_currency != self.price.currency:
                self.price = Price(amount=new_amount, currency=new_currency)
                changed.append("price")

        if stock is not _UNSET and stock != self.stock:
            self.stock = stock
            changed.append("stock")

        if not changed:
            return []

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                seller_id=str(self.seller_id),
                changed_fields=json.dumps(changed),
                title=self.title,
                price_amount=self.price.amount,
                price_currency=self.price.currency,
                stock=self.stock,
                updated_at=now,
            )
        )
        return changed

    def mark_deleted(self):
        self.raise_(
            ProductDeleted(
                product_id=str(self.id),
                seller_id=str(self.seller_id),
                deleted_at=datetime.now(UTC),
            )
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "price": {"amount": self.price.amount, "currency": self.price.currency},
            "seller": str(self.seller_id),
            "images": [
                {"id": str(i.id), "url": i.url, "thumbnail": i.thumbnail, "file_id": i.file_id} for i in self.images
            ],
            "stock": self.stock,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@catalogue.repository(part_of=Product)
class ProductRepository:
    """Catalogue queries: text search, price range and per-seller listings."""

    def fetch(self, product_id) -> Product:
        try:
            return self.get(product_id)
        except ObjectNotFoundError as exc:
            raise ObjectNotFoundError("Product not found") from exc

    def search(self, q=None, min_price=None, max_price=None, skip=0, limit=MAX_PAGE_SIZE) -> list[Product]:
        query = self._dao.query
        if q:
            query = query.filter(Q(title__icontains=q) | Q(description__icontains=q))
        if min_price is not None:
            query = query.filter(price_amount__gte=min_price)
        if max_price is not None:
            query = query.filter(price_amount__lte=max_price)

        limit = max(1, min(limit, MAX_PAGE_SIZE))
        return query.order_by("-created_at").offset(max(skip, 0)).limit(limit).all().items

    def for_seller(self, seller_id, skip=0, limit=MAX_PAGE_SIZE) -> list[Product]:
        limit = max(1, min(limit, MAX_PAGE_SIZE))
        return (
            self._dao.query.filter(seller_id=str(seller_id))
            .order_by("-created_at")
            .offset(max(skip, 0))
            .limit(limit)
            .all()
            .items
        )
