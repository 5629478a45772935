from catalogue.product.product import Product
from protean import current_domain


def _add(title, amount, seller_id="seller-001", description=""):
    product = Product.create(seller_id=seller_id, title=title, price_amount=amount, description=description)
    current_domain.repository_for(Product).add(product)
    return product


class TestSearch:
    def test_text_search_matches_title_and_description(self):
        _add("Steel Kettle", 1500.0)
        _add("Teapot", 800.0, description="Pairs well with a kettle")
        _add("Toaster", 2000.0)

        titles = {p.title for p in current_domain.repository_for(Product).search(q="kettle")}
        assert titles == {"Steel Kettle", "Teapot"}

    def test_price_range(self):
        _add("Cheap", 100.0)
        _add("Mid", 500.0)
        _add("Dear", 5000.0)

        titles = {p.title for p in current_domain.repository_for(Product).search(min_price=200, max_price=1000)}
        assert titles == {"Mid"}

    def test_limit_is_capped_at_twenty(self):
        for i in range(25):
            _add(f"Item {i}", 10.0 + i)

        assert len(current_domain.repository_for(Product).search(limit=100)) == 20

    def test_skip(self):
        for i in range(5):
            _add(f"Item {i}", 10.0 + i)

        assert len(current_domain.repository_for(Product).search(skip=3)) == 2


class TestForSeller:
    def test_only_the_sellers_products(self):
        _add("Mine", 10.0, seller_id="seller-001")
        _add("Theirs", 10.0, seller_id="seller-002")

        titles = [p.title for p in current_domain.repository_for(Product).for_seller("seller-001")]
        assert titles == ["Mine"]
