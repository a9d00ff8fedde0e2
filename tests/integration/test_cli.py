import json

import pytest

from feed_samples import FakeFetcher, rss_feed, rss_item
from feedwords.analysis import FeedWordAnalyzer
from feedwords.cli_router import CLIRouter
from feedwords.commands import get_command, list_commands
from feedwords.config import ConfigManager
from feedwords.container import Container
from feedwords.settings_store import AnalyzerSettings, JsonSettingsStore

FEED1_URL = "https://feed1.example.com/rss"


@pytest.fixture
def settings_store(tmp_path):
    store = JsonSettingsStore(tmp_path / "settings.json")
    store.save(AnalyzerSettings(selected_feeds={"Feed1": FEED1_URL}))
    return store


@pytest.fixture
def container(clean_env, settings_store):
    payload = rss_feed(rss_item(
        "Markets Rally As Stocks Climb",
        "Shares rose sharply",
        "https://feed1.example.com/markets",
        "Mon, 01 Jan 2024 10:00:00 GMT",
    ))
    container = Container()
    container.register_instance('config', ConfigManager(env_file_path=None).get_config())
    container.register_instance('settings_store', settings_store)
    container.register_instance('analyzer', FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: payload})))
    return container


@pytest.fixture
def router(container):
    return CLIRouter(container=container)


class TestAnalyzeCommand:
    """Tests for `analyze run`."""

    def test_text_report(self, router, capsys):
        assert router.route_command(["analyze", "run"]) == 0

        out = capsys.readouterr().out
        assert "=== Word Frequency Analysis ===" in out
        assert "Articles analyzed: 1" in out
        assert "markets" in out
        assert "- Feed1: 1 articles, ok" in out

    def test_json_output(self, router, capsys):
        assert router.route_command(["analyze", "run", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_articles"] == 1
        assert data["word_frequency"][0]["word"] == "markets"

    def test_sources_lookup(self, router, capsys):
        assert router.route_command(["analyze", "run", "--sources", "Markets"]) == 0

        out = capsys.readouterr().out
        assert 'Articles containing "markets":' in out
        assert "[2024-01-01] [Feed1] Markets Rally As Stocks Climb" in out
        assert "https://feed1.example.com/markets" in out

    def test_sources_for_unknown_word(self, router, capsys):
        assert router.route_command(["analyze", "run", "--sources", "nothing", "--source-feed", "Feed1"]) == 0
        assert "No source articles found for this word." in capsys.readouterr().out

    def test_custom_stopwords_applied(self, router, settings_store, capsys):
        settings = settings_store.load()
        settings.custom_stopwords = ["markets"]
        settings_store.save(settings)

        assert router.route_command(["analyze", "run", "--json"]) == 0
        words = [entry["word"] for entry in json.loads(capsys.readouterr().out)["word_frequency"]]
        assert "markets" not in words
        assert "rally" in words

    def test_no_feeds_selected(self, router, settings_store):
        settings_store.save(AnalyzerSettings(selected_feeds={}))
        assert router.route_command(["analyze", "run"]) == 3

    def test_feed_filter_without_match(self, router):
        assert router.route_command(["analyze", "run", "--feed", "Elsewhere"]) == 3

    def test_invalid_argument(self, router):
        assert router.route_command(["analyze", "run", "--top", "many"]) == 2


class TestSettingsCommands:
    """Tests for `feeds` and `stopwords`."""

    def test_feeds_list_marks_selection(self, router, capsys):
        assert router.route_command(["feeds", "list"]) == 0

        out = capsys.readouterr().out
        assert "[x] Feed1: https://feed1.example.com/rss" in out
        assert "[ ] BBC News:" in out

    def test_feeds_select(self, router, settings_store):
        assert router.route_command(["feeds", "select", "Hacker News", "Slashdot"]) == 0
        assert list(settings_store.load().selected_feeds) == ["Hacker News", "Slashdot"]

    def test_feeds_select_unknown(self, router, settings_store):
        assert router.route_command(["feeds", "select", "Hacker News", "Bogus"]) == 1
        assert list(settings_store.load().selected_feeds) == ["Hacker News"]

    def test_feeds_add_and_remove(self, router, settings_store):
        assert router.route_command(["feeds", "add", "My Blog", "https://blog.example.com/feed"]) == 0
        assert settings_store.load().selected_feeds["My Blog"] == "https://blog.example.com/feed"

        assert router.route_command(["feeds", "remove", "My Blog"]) == 0
        assert "My Blog" not in settings_store.load().selected_feeds
        assert router.route_command(["feeds", "remove", "My Blog"]) == 1

    def test_feeds_add_invalid_url(self, router, settings_store):
        assert router.route_command(["feeds", "add", "Local", "file:///tmp/feed.xml"]) == 22
        assert "Local" not in settings_store.load().selected_feeds

    def test_feeds_reset(self, router, settings_store):
        assert router.route_command(["feeds", "reset"]) == 0
        assert "BBC News" in settings_store.load().selected_feeds

    def test_stopwords_lifecycle(self, router, settings_store, capsys):
        assert router.route_command(["stopwords", "add", "Trump", "biden", "trump"]) == 0
        assert settings_store.load().custom_stopwords == ["trump", "biden"]

        assert router.route_command(["stopwords", "remove", "TRUMP"]) == 0
        assert settings_store.load().custom_stopwords == ["biden"]

        capsys.readouterr()
        assert router.route_command(["stopwords", "list"]) == 0
        assert "  biden" in capsys.readouterr().out

        assert router.route_command(["stopwords", "clear"]) == 0
        assert settings_store.load().custom_stopwords == []


class TestRouting:
    """Tests for router edge cases and the command registry."""

    def test_no_command_prints_help(self, router, capsys):
        assert router.route_command([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_missing_subcommand(self, router):
        assert router.route_command(["feeds"]) != 0

    def test_get_command_unknown(self, container):
        with pytest.raises(ValueError):
            get_command("publish", container=container)

    def test_list_commands(self):
        assert set(list_commands()) == {"analyze", "feeds", "stopwords"}
