import pytest
from notifications.notification.notification import NotificationType
from notifications.templates import TEMPLATE_REGISTRY, get_template


class TestRegistry:
    def test_every_type_has_a_template(self):
        assert set(TEMPLATE_REGISTRY) == {t.value for t in NotificationType}

    def test_templates_declare_their_type(self):
        for notification_type, template_cls in TEMPLATE_REGISTRY.items():
            assert template_cls.notification_type == notification_type

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_template("Newsletter")


class TestWelcome:
    def test_addresses_user_by_name(self):
        rendered = get_template("Welcome").render({"first_name": "Jane", "last_name": "Doe"})

        assert rendered["subject"] == "Welcome to Shopfront"
        assert "Hi Jane Doe," in rendered["body"]
        assert "Jane Doe" in rendered["html_body"]

    def test_falls_back_without_a_name(self):
        assert "Hi there," in get_template("Welcome").render({})["body"]

    def test_html_is_escaped(self):
        rendered = get_template("Welcome").render({"first_name": "<script>"})
        assert "<script>" not in rendered["html_body"]
        assert "&lt;script&gt;" in rendered["html_body"]


class TestOrderConfirmation:
    def test_lists_items_and_total(self):
        rendered = get_template("OrderConfirmation").render(
            {
                "order_id": "ord-1",
                "items": [
                    {"product_id": "p1", "title": "Kettle", "quantity": 2},
                    {"product_id": "p2", "title": None, "quantity": 1},
                ],
                "total_amount": "400.00",
                "currency": "INR",
            }
        )

        assert rendered["subject"] == "Order #ord-1 received"
        assert "- Kettle x 2" in rendered["body"]
        assert "- p2 x 1" in rendered["body"]
        assert "Order Total: INR 400.00" in rendered["body"]


class TestPayments:
    def test_receipt(self):
        rendered = get_template("PaymentReceipt").render(
            {"username": "jane", "order_id": "ord-1", "amount": "400.00", "currency": "INR"}
        )
        assert rendered["subject"] == "Payment Successful"
        assert "ord-1" in rendered["body"]
        assert "400.00" in rendered["body"]

    def test_failure(self):
        rendered = get_template("PaymentFailed").render({"order_id": "ord-1", "reason": "Card declined"})
        assert rendered["subject"] == "Payment Failed"
        assert "ord-1" in rendered["body"]


class TestProductCreated:
    def test_subject_names_product(self):
        rendered = get_template("ProductCreated").render(
            {"title": "Kettle", "price_amount": "100.00", "price_currency": "INR", "stock": 5}
        )
        assert rendered["subject"] == 'Your product "Kettle" is live'
        assert "Kettle" in rendered["body"]
