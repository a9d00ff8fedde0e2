import json

import pytest

from feed_samples import FakeAsyncFetcher, FakeFetcher, FakeResponse, FakeSession, rss_feed, rss_item
from feedwords.analysis import FeedWordAnalyzer
from feedwords.exceptions import EmptyResultWarning, FetchTimeoutError, NoFeedsSelectedError, ValidationError
from feedwords.fetcher import FeedFetcher
from feedwords.models.analysis import AnalysisRequest, WordCount
from feedwords.models.article import FeedSource
from feedwords.stopwords import StopwordSet

FEED1_URL = "https://feed1.example.com/rss"
FEED2_URL = "https://feed2.example.com/rss"


def make_request(feeds, custom_stopwords=(), top_n=100):
    return AnalysisRequest(feeds=feeds, stopwords=StopwordSet.from_custom(custom_stopwords), top_n=top_n)


@pytest.fixture
def markets_payload():
    return rss_feed(rss_item(
        "Markets Rally As Stocks Climb",
        "<![CDATA[<p>Shares rose sharply</p>]]>",
        "https://feed1.example.com/markets",
        "Mon, 01 Jan 2024 10:00:00 GMT",
    ))


@pytest.fixture
def economy_payload():
    return rss_feed(
        rss_item("Economy slows", "Growth weakens across the economy", "https://feed2.example.com/1"),
        rss_item("Markets steady", "Investors wait on economy data", "https://feed2.example.com/2"),
    )


class TestSingleFeed:
    """A single well-formed feed."""

    def test_word_counts_and_sources(self, markets_payload):
        analyzer = FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: markets_payload}))
        result = analyzer.analyze(make_request([FeedSource("Feed1", FEED1_URL)]))

        words = [wc.word for wc in result.word_frequency]
        assert words == ["markets", "rally", "stocks", "climb", "shares", "rose", "sharply"]
        assert all(wc.frequency == 1 for wc in result.word_frequency)
        assert result.total_articles == 1
        assert result.total_unique_words == 7
        assert result.warning is None

        sources = analyzer.get_word_sources("markets")
        assert len(sources) == 1
        assert sources[0].title == "Markets Rally As Stocks Climb"
        assert sources[0].link == "https://feed1.example.com/markets"
        assert sources[0].published == "Mon, 01 Jan 2024 10:00:00 GMT"
        assert sources[0].feed_name == "Feed1"

    def test_atom_feed(self, atom_payload):
        analyzer = FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: atom_payload}))
        result = analyzer.analyze(make_request([FeedSource("Atom", FEED1_URL)]))

        words = {wc.word for wc in result.word_frequency}
        assert {"economy", "grows", "again", "growth", "beats", "forecasts"} <= words
        assert analyzer.get_word_sources("growth")[0].link == "https://example.com/atom/1"

    def test_truncated_feed_uses_fallback(self):
        payload = (
            b'<rss><channel><item><title>Recovered headline</title>'
            b'<description>Partial payload</description></item><item><title>Lo'
        )
        analyzer = FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: payload}))
        result = analyzer.analyze(make_request([FeedSource("Feed1", FEED1_URL)]))

        assert result.total_articles == 1
        assert [wc.word for wc in result.word_frequency] == ["recovered", "headline", "partial", "payload"]


class TestMultipleFeeds:
    """Aggregation across feeds and failure isolation."""

    def test_global_counts_sum_feed_counts(self, two_feed_sources, markets_payload, economy_payload):
        fetcher = FakeFetcher({FEED1_URL: markets_payload, FEED2_URL: economy_payload})
        result = FeedWordAnalyzer(fetcher=fetcher).analyze(make_request(two_feed_sources))

        global_counts = {wc.word: wc.frequency for wc in result.word_frequency}
        feed_counts = result.feed_word_counts
        for word, total in global_counts.items():
            assert total == sum(
                wc.frequency for counts in feed_counts.values() for wc in counts if wc.word == word
            )

        assert global_counts["economy"] == 3
        assert global_counts["markets"] == 2
        assert result.word_frequency[0] == WordCount("economy", 3)
        assert list(feed_counts) == ["Feed1", "Feed2"]

    def test_sources_filtered_by_feed(self, two_feed_sources, markets_payload, economy_payload):
        fetcher = FakeFetcher({FEED1_URL: markets_payload, FEED2_URL: economy_payload})
        analyzer = FeedWordAnalyzer(fetcher=fetcher)
        analyzer.analyze(make_request(two_feed_sources))

        assert [ref.feed_name for ref in analyzer.get_word_sources("markets")] == ["Feed1", "Feed2"]
        feed2_sources = analyzer.get_word_sources("markets", feed_name="Feed2")
        assert [ref.title for ref in feed2_sources] == ["Markets steady"]
        assert analyzer.get_word_sources("markets", feed_name="Feed3") == []
        assert analyzer.get_word_sources("nonexistent") == []

    def test_failed_feed_does_not_abort_run(self, two_feed_sources, economy_payload):
        fetcher = FakeFetcher({FEED2_URL: economy_payload})
        result = FeedWordAnalyzer(fetcher=fetcher).analyze(make_request(two_feed_sources))

        assert result.total_articles == 2
        assert "Feed1" not in result.feed_word_counts
        failed = result.get_feed_report("Feed1")
        assert failed.status == "failed"
        assert failed.error == "connection refused"
        assert result.get_feed_report("Feed2").status == "ok"

    def test_timeout_is_contained(self, two_feed_sources, economy_payload):
        fetcher = FakeFetcher({
            FEED1_URL: FetchTimeoutError("Feed1", FEED1_URL, 30),
            FEED2_URL: economy_payload,
        })
        result = FeedWordAnalyzer(fetcher=fetcher).analyze(make_request(two_feed_sources))

        assert result.get_feed_report("Feed1").error == "timed out after 30s"
        assert result.word_frequency

    def test_unparseable_feed_reports_empty(self, two_feed_sources, economy_payload):
        fetcher = FakeFetcher({FEED1_URL: b"<html>not a feed</html>", FEED2_URL: economy_payload})
        result = FeedWordAnalyzer(fetcher=fetcher).analyze(make_request(two_feed_sources))

        assert result.get_feed_report("Feed1").status == "empty"
        assert result.get_feed_report("Feed1").error is None

    def test_truncation_happens_after_aggregation(self, two_feed_sources):
        feed1 = rss_feed(rss_item("apple apple apple pear"))
        feed2 = rss_feed(rss_item("pear pear pear kiwi"))
        fetcher = FakeFetcher({FEED1_URL: feed1, FEED2_URL: feed2})

        result = FeedWordAnalyzer(fetcher=fetcher).analyze(make_request(two_feed_sources, top_n=1))

        assert result.word_frequency == [WordCount("pear", 4)]
        assert result.feed_word_counts["Feed1"] == [WordCount("apple", 3)]
        assert result.feed_word_counts["Feed2"] == [WordCount("pear", 3)]

    def test_parallel_matches_sequential(self, two_feed_sources, markets_payload, economy_payload):
        payloads = {FEED1_URL: markets_payload, FEED2_URL: economy_payload}
        sequential = FeedWordAnalyzer(fetcher=FakeFetcher(payloads)).analyze(make_request(two_feed_sources))
        sync_fetcher = FakeFetcher(payloads)
        async_fetcher = FakeAsyncFetcher(payloads)
        parallel = FeedWordAnalyzer(fetcher=sync_fetcher, max_workers=4, async_fetcher=async_fetcher).analyze(
            make_request(two_feed_sources)
        )

        assert async_fetcher.batches == [["Feed1", "Feed2"]]
        assert async_fetcher.limits == [4]
        assert sync_fetcher.calls == []

        assert parallel.word_frequency == sequential.word_frequency
        assert parallel.feed_word_counts == sequential.feed_word_counts
        assert parallel.source_index.to_dict() == sequential.source_index.to_dict()

    def test_repeated_runs_are_identical(self, two_feed_sources, markets_payload, economy_payload):
        analyzer = FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: markets_payload, FEED2_URL: economy_payload}))
        first = analyzer.analyze(make_request(two_feed_sources))
        second = analyzer.analyze(make_request(two_feed_sources))

        assert first.word_frequency == second.word_frequency
        assert first.source_index.to_dict() == second.source_index.to_dict()
        assert analyzer.last_result is second


class TestEmptyResults:
    """Runs that complete without ranked words."""

    def test_all_words_filtered(self, markets_payload):
        stopwords = ["markets", "rally", "stocks", "climb", "shares", "rose", "sharply"]
        analyzer = FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: markets_payload}))
        result = analyzer.analyze(make_request([FeedSource("Feed1", FEED1_URL)], custom_stopwords=stopwords))

        assert result.word_frequency == []
        assert result.feed_word_counts == {}
        assert result.total_articles == 1
        assert isinstance(result.warning, EmptyResultWarning)
        assert result.warning.reason == EmptyResultWarning.NO_WORDS

    def test_all_feeds_failed(self, two_feed_sources):
        result = FeedWordAnalyzer(fetcher=FakeFetcher()).analyze(make_request(two_feed_sources))

        assert result.is_empty
        assert result.total_articles == 0
        assert result.warning.reason == EmptyResultWarning.NO_ARTICLES
        assert [report.status for report in result.feed_reports] == ["failed", "failed"]

    def test_no_feeds_selected(self):
        fetcher = FakeFetcher()
        with pytest.raises(NoFeedsSelectedError):
            FeedWordAnalyzer(fetcher=fetcher).analyze(make_request([]))
        assert fetcher.calls == []

    def test_sources_before_any_run(self):
        assert FeedWordAnalyzer(fetcher=FakeFetcher()).get_word_sources("markets") == []


class TestRequestAndSerialization:
    """Request validation and JSON output."""

    @pytest.mark.parametrize("top_n", [0, -5, True, "10"])
    def test_invalid_top_n(self, top_n):
        with pytest.raises(ValidationError):
            make_request([FeedSource("Feed1", FEED1_URL)], top_n=top_n)

    def test_duplicate_feed_names_rejected(self):
        with pytest.raises(ValidationError):
            make_request([FeedSource("Feed1", FEED1_URL), FeedSource("Feed1", FEED2_URL)])

    def test_result_serializes_to_json(self, two_feed_sources, markets_payload):
        result = FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: markets_payload})).analyze(
            make_request(two_feed_sources)
        )
        data = json.loads(json.dumps(result.to_dict()))

        assert data["word_frequency"][0] == {"word": "markets", "frequency": 1}
        assert data["word_sources"]["markets"][0]["feed_name"] == "Feed1"
        assert data["feeds"][1]["status"] == "failed"
        assert data["total_articles"] == 1
        assert data["timestamp"].endswith("+00:00")
        assert data["warning"] is None


class TestFeedOutcomes:
    """Per-feed status reporting and source attribution across feeds."""

    def test_reachable_feed_with_empty_body_is_empty_not_failed(self):
        analyzer = FeedWordAnalyzer(fetcher=FeedFetcher(session=FakeSession(FakeResponse(b""))))
        result = analyzer.analyze(make_request([FeedSource("Quiet", FEED1_URL)]))

        report = result.get_feed_report("Quiet")
        assert report.status == "empty"
        assert report.error is None
        assert result.warning.reason == EmptyResultWarning.NO_ARTICLES

    def test_parallel_fetch_failures_are_reported(self, two_feed_sources, economy_payload):
        async_fetcher = FakeAsyncFetcher({FEED2_URL: economy_payload})
        analyzer = FeedWordAnalyzer(fetcher=FakeFetcher(), max_workers=2, async_fetcher=async_fetcher)
        result = analyzer.analyze(make_request(two_feed_sources))

        assert result.get_feed_report("Feed1").status == "failed"
        assert result.get_feed_report("Feed1").error == "connection refused"
        assert result.get_feed_report("Feed2").status == "ok"

    def test_sources_capped_at_first_five_articles_across_feeds(self, two_feed_sources):
        feed1 = rss_feed(*(rss_item(f"Economy report {i}", link=f"https://feed1.example.com/{i}")
                           for i in range(1, 5)))
        feed2 = rss_feed(*(rss_item(f"Economy outlook {i}", link=f"https://feed2.example.com/{i}")
                           for i in range(1, 4)))
        analyzer = FeedWordAnalyzer(fetcher=FakeFetcher({FEED1_URL: feed1, FEED2_URL: feed2}))
        result = analyzer.analyze(make_request(two_feed_sources))

        assert result.word_frequency[0] == WordCount("economy", 7)
        assert [(ref.feed_name, ref.title) for ref in analyzer.get_word_sources("economy")] == [
            ("Feed1", "Economy report 1"),
            ("Feed1", "Economy report 2"),
            ("Feed1", "Economy report 3"),
            ("Feed1", "Economy report 4"),
            ("Feed2", "Economy outlook 1"),
        ]
        assert [ref.title for ref in analyzer.get_word_sources("economy", feed_name="Feed2")] == [
            "Economy outlook 1"
        ]
