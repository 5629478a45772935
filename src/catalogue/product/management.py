"""Seller-side product maintenance — commands and handler.

Only the seller who listed a product may change or delete it.
"""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.images import get_image_store
from catalogue.product.product import Product
from shared.exceptions import PermissionDenied
from shared.logging import get_logger

logger = get_logger(__name__)


@catalogue.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    title: String(max_length=255)
    description: String(max_length=2000)
    price_amount: Float()
    price_currency: String(max_length=3)
    stock: Integer(min_value=0)


@catalogue.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)


def _owned_product(repo, product_id, seller_id) -> Product:
    product = repo.fetch(product_id)
    if not product.is_owned_by(seller_id):
        logger.info("Seller tried to modify a product they do not own", product_id=str(product_id), seller_id=str(seller_id))
        raise PermissionDenied("Forbidden: You can only modify your own products")
    return product


@catalogue.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id)

        updates = {}
        for field in ("title", "description", "price_amount", "price_currency", "stock"):
            value = getattr(command, field, None)
            if value is not None:
                updates[field] = value

        product.update_details(**updates)
        repo.add(product)
        return product.to_dict()

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id)

        product.mark_deleted()
        repo.add(product)
        repo._dao.delete(product)

        store = get_image_store()
        for image in product.images:
            if image.file_id:
                store.delete(image.file_id)

        logger.info("Product deleted", product_id=str(product.id), seller_id=str(command.seller_id))
        return str(product.id)
