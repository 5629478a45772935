"""Payment failed template — sent when a payment could not be captured."""

from html import escape

from notifications.notification.notification import NotificationType


class PaymentFailedTemplate:
    notification_type = NotificationType.PAYMENT_FAILED.value

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("username") or "there"
        order_id = context.get("order_id", "N/A")
        reason = context.get("reason")
        reason_line = f"Reason: {reason}\n\n" if reason else ""
        return {
            "subject": "Payment Failed",
            "body": (
                f"Hi {name},\n\n"
                f"Unfortunately, your payment for order #{order_id} was not successful.\n\n"
                f"{reason_line}"
                "Please try again or contact support if the issue persists."
            ),
            "html_body": (
                "<h1>Payment Failed</h1>"
                f"<p>Dear {escape(name)},</p>"
                f"<p>Unfortunately, your payment for order ID: {escape(str(order_id))} was not successful.</p>"
                "<p>Please try again or contact support if the issue persists.</p>"
                "<p>Best regards,<br/>The Shopfront Team</p>"
            ),
        }
