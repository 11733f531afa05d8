from pathlib import Path

import pytest

from shopbot.catalogue import Group, Leaf

DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "catalogue.json"


@pytest.fixture
def catalogue_path():
    """Path to the bundled sample catalogue."""
    return str(DATA_PATH)


@pytest.fixture
def scenario_tree():
    """
    z
    ├── a: [1, 4]
    └── b: [b: [32], 2]
    """
    return Group(
        "z",
        (
            Group("a", (Leaf(1), Leaf(4))),
            Group("b", (Group("b", (Leaf(32),)), Leaf(2))),
        ),
    )
