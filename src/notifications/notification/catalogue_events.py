"""Inbound cross-domain event handler — Notifications reacts to Catalogue events.

Listens for ProductCreated to tell the seller their listing is live.
"""

from notifications.domain import notifications
from notifications.notification.helpers import create_notification
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.catalogue import ProductCreated

notifications.register_external_event(ProductCreated, "Catalogue.ProductCreated.v1")


@notifications.event_handler(part_of=Notification, stream_category="catalogue::product")
class CatalogueEventsHandler:
    @handle(ProductCreated)
    def on_product_created(self, event: ProductCreated) -> None:
        create_notification(
            recipient_id=str(event.seller_id),
            recipient_email=event.seller_email,
            notification_type=NotificationType.PRODUCT_CREATED.value,
            context={
                "title": event.title,
                "price_amount": f"{event.price_amount:.2f}",
                "price_currency": event.price_currency,
                "stock": event.stock or 0,
            },
            source_event_type="Catalogue.ProductCreated.v1",
        )
