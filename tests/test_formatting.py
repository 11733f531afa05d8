from shopbot.formatting import format_candidates, format_group_heading, format_money, format_product
from shopbot.models import Candidate, Product


def test_format_money():
    assert format_money(5) == "$5.00"
    assert format_money("n/a") == "n/a"


def test_format_product_with_and_without_description():
    assert format_product(Product(price=4, title="Green Tea", description="Sencha")) == "Green Tea — $4.00\nSencha"
    assert format_product(Product(price=3, title="Oat Cookies")) == "Oat Cookies — $3.00"


def test_group_heading():
    assert format_group_heading(["Shop"]) == "Shop"
    assert format_group_heading(["Shop", "Drinks", "Tea"]) == "Shop > Drinks > Tea"
    assert format_group_heading([]) == "Catalogue"


def test_format_candidates():
    c = Candidate(kind="item", address="/0/", display="Green Tea", score=100.0)
    assert format_candidates([], query="x") == "I couldn't find 'x' in the catalogue."
    assert format_candidates([c], query="green") == "Found Green Tea:"
    assert "2 matches" in format_candidates([c, c], query="tea")
