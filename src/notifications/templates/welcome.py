"""Welcome notification template — sent when a user registers."""

from html import escape

from notifications.notification.notification import NotificationType


class WelcomeTemplate:
    notification_type = NotificationType.WELCOME.value

    @staticmethod
    def render(context: dict) -> dict:
        name = " ".join(part for part in (context.get("first_name"), context.get("last_name")) if part) or "there"
        return {
            "subject": "Welcome to Shopfront",
            "body": (
                f"Hi {name},\n\n"
                "Thank you for registering with us. We're excited to have you on board!\n\n"
                "Best regards,\n"
                "The Shopfront Team"
            ),
            "html_body": (
                "<h1>Welcome to Shopfront!</h1>"
                f"<p>Dear {escape(name)},</p>"
                "<p>Thank you for registering with us. We're excited to have you on board!</p>"
                "<p>Best regards,<br/>The Shopfront Team</p>"
            ),
        }
