"""Product listed template — sent to the seller when their product goes live."""

from html import escape

from notifications.notification.notification import NotificationType


class ProductCreatedTemplate:
    notification_type = NotificationType.PRODUCT_CREATED.value

    @staticmethod
    def render(context: dict) -> dict:
        title = context.get("title", "Your product")
        price = f"{context.get('price_currency', 'INR')} {context.get('price_amount', '0.00')}"
        return {
            "subject": f"Your product \"{title}\" is live",
            "body": (
                f"Your product \"{title}\" is now listed at {price} "
                f"with {context.get('stock', 0)} in stock.\n\n"
                "Happy selling!"
            ),
            "html_body": (
                "<h1>Product listed</h1>"
                f"<p>Your product <strong>{escape(str(title))}</strong> is now listed at {escape(price)}.</p>"
                "<p>Happy selling!</p>"
            ),
        }
