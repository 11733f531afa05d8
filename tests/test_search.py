import pytest

from shopbot.bootstrap import load_catalogue
from shopbot.search import build_search_index, find_nodes


@pytest.fixture
def index(catalogue_path):
    return build_search_index(load_catalogue(catalogue_path))


def test_index_skips_root_and_covers_every_other_node(index):
    assert "/" not in index.labels
    assert len(index.labels) == 16
    assert index.kinds["/0/"] == "group"
    assert index.kinds["/0/0/0/"] == "item"


def test_exact_match_resolves_green_tea(index):
    hits = find_nodes(index, "green tea")
    assert len(hits) == 1
    assert hits[0].address == "/0/0/0/"
    assert hits[0].display == "Green Tea"
    assert hits[0].score == 100.0


def test_exact_match_ignores_case_and_punctuation(index):
    hits = find_nodes(index, "  GIFT-cards!! ")
    assert [h.address for h in hits] == ["/2/"]
    assert hits[0].kind == "group"


def test_fuzzy_match_finds_almonds(index):
    hits = find_nodes(index, "almond")
    assert hits
    assert hits[0].display == "Salted Almonds"
    assert hits[0].address == "/1/0/"


def test_empty_query_returns_nothing(index):
    assert find_nodes(index, "   ") == []


def test_unknown_returns_nothing(index):
    assert find_nodes(index, "xqzvwkj") == []


def test_trace_goes_to_stderr(index, capsys):
    find_nodes(index, "green tea", debug=True)
    err = capsys.readouterr().err
    assert "[trace] search.find" in err
