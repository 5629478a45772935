"""Template registry — maps NotificationType to template classes.

Each template renders a subject, a plain-text body and an HTML body from
the event context data.
"""

from notifications.notification.notification import NotificationType
from notifications.templates.order_confirmation import OrderConfirmationTemplate
from notifications.templates.payment_failed import PaymentFailedTemplate
from notifications.templates.payment_receipt import PaymentReceiptTemplate
from notifications.templates.product_created import ProductCreatedTemplate
from notifications.templates.welcome import WelcomeTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.WELCOME.value: WelcomeTemplate,
    NotificationType.ORDER_CONFIRMATION.value: OrderConfirmationTemplate,
    NotificationType.PAYMENT_RECEIPT.value: PaymentReceiptTemplate,
    NotificationType.PAYMENT_FAILED.value: PaymentFailedTemplate,
    NotificationType.PRODUCT_CREATED.value: ProductCreatedTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
