"""Payment receipt template — sent when payment is captured."""

from html import escape

from notifications.notification.notification import NotificationType


class PaymentReceiptTemplate:
    notification_type = NotificationType.PAYMENT_RECEIPT.value

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("username") or "there"
        order_id = context.get("order_id", "N/A")
        amount = context.get("amount", "0.00")
        currency = context.get("currency", "INR")
        return {
            "subject": "Payment Successful",
            "body": (
                f"Hi {name},\n\n"
                f"We have received your payment of {amount} {currency} for order #{order_id}.\n\n"
                "Thank you for your purchase!"
            ),
            "html_body": (
                "<h1>Payment Successful!</h1>"
                f"<p>Dear {escape(name)},</p>"
                f"<p>We have received your payment of {escape(str(amount))} {escape(str(currency))} "
                f"for order ID: {escape(str(order_id))}.</p>"
                "<p>Thank you for your purchase!</p>"
                "<p>Best regards,<br/>The Shopfront Team</p>"
            ),
        }
