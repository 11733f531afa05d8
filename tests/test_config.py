import pytest

from shopbot.config import DEFAULT_INPUT_FILE, Settings


def test_defaults_from_empty_environment():
    s = Settings.from_env({})
    assert s.input_file == DEFAULT_INPUT_FILE
    assert s.bot_name == "shopbot"
    assert s.page_size == 3
    assert s.debug_trace is False


def test_values_from_environment():
    s = Settings.from_env(
        {"INPUT_FILE": "/tmp/cat.json", "BOT_NAME": "zggff_bot", "PAGE_SIZE": "5", "DEBUG_TRACE": "1"}
    )
    assert s.input_file == "/tmp/cat.json"
    assert s.bot_name == "zggff_bot"
    assert s.page_size == 5
    assert s.debug_trace is True


def test_blank_values_keep_defaults():
    s = Settings.from_env({"PAGE_SIZE": "  ", "INPUT_FILE": ""})
    assert s.page_size == 3
    assert s.input_file == DEFAULT_INPUT_FILE


@pytest.mark.parametrize("page_size", ["0", "-2", "three"])
def test_invalid_page_size_names_variable(page_size):
    with pytest.raises(ValueError, match="PAGE_SIZE"):
        Settings.from_env({"PAGE_SIZE": page_size})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "4")
    monkeypatch.delenv("DEBUG_TRACE", raising=False)
    assert Settings.from_env().page_size == 4
