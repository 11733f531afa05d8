from shopbot.address import Address
from shopbot.catalogue import Group, Leaf
from shopbot.keyboard import BACK_LABEL, build_keyboard
from shopbot.models import Product


def _texts(keyboard):
    return [[b.text for b in row] for row in keyboard.rows]


def _tokens(keyboard):
    return [[b.callback_data for b in row] for row in keyboard.rows]


def test_root_keyboard_for_scenario(scenario_tree):
    kb = build_keyboard(scenario_tree, Address.root(), 3)
    assert _texts(kb) == [["a", "b"]]
    assert _tokens(kb) == [["/0/", "/1/"]]


def test_buttons_carry_child_addresses_across_rows():
    root = Group(
        "Shop",
        (
            Group(
                "Tea",
                tuple(Leaf(Product(price=i, title=f"Tea {i}")) for i in range(5)),
            ),
        ),
    )
    kb = build_keyboard(root, Address.of(0), page_size=2)
    assert _texts(kb) == [["Tea 0", "Tea 1"], ["Tea 2", "Tea 3"], ["Tea 4"], [BACK_LABEL]]
    assert _tokens(kb) == [["/0/0/", "/0/1/"], ["/0/2/", "/0/3/"], ["/0/4/"], ["/"]]


def test_back_button_can_be_disabled(scenario_tree):
    kb = build_keyboard(scenario_tree, Address.of(1), 3, back_button=False)
    assert _tokens(kb) == [["/1/0/", "/1/1/"]]


def test_leaf_and_missing_addresses_have_no_keyboard(scenario_tree):
    assert build_keyboard(scenario_tree, Address.of(0, 0), 3) is None
    assert build_keyboard(scenario_tree, Address.of(9), 3) is None
    assert build_keyboard(scenario_tree, Address.of(0, 0, 0), 3) is None


def test_empty_group_only_has_back_row():
    root = Group("Shop", (Group("Gift Cards", ()),))
    kb = build_keyboard(root, Address.of(0), 3)
    assert _tokens(kb) == [["/"]]
    assert build_keyboard(Group("Empty"), Address.root(), 3).rows == []
