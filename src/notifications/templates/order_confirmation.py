"""Order confirmation template — sent when an order is placed."""

from html import escape

from notifications.notification.notification import NotificationType


class OrderConfirmationTemplate:
    notification_type = NotificationType.ORDER_CONFIRMATION.value

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        total = context.get("total_amount", "0.00")
        currency = context.get("currency", "INR")
        items = context.get("items", [])

        lines = "\n".join(f"- {item.get('title') or item['product_id']} x {item['quantity']}" for item in items)
        html_lines = "".join(
            f"<li>{escape(str(item.get('title') or item['product_id']))} &times; {item['quantity']}</li>"
            for item in items
        )
        return {
            "subject": f"Order #{order_id} received",
            "body": (
                f"We have received your order #{order_id}.\n\n"
                f"{lines}\n\n"
                f"Order Total: {currency} {total}\n\n"
                "We'll let you know once your payment is confirmed.\n\n"
                "Thank you for shopping with Shopfront!"
            ),
            "html_body": (
                "<h1>Order received</h1>"
                f"<p>We have received your order <strong>#{escape(str(order_id))}</strong>.</p>"
                f"<ul>{html_lines}</ul>"
                f"<p>Order Total: {escape(str(currency))} {escape(str(total))}</p>"
                "<p>Thank you for shopping with Shopfront!</p>"
            ),
        }
