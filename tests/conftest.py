"""
Shared test fixtures for the extractor test suite.
"""
import pytest


# ==========================================================================
# Tweets
# ==========================================================================

@pytest.fixture
def multibyte_tweet():
    return "Hello @gülçin, check #münchen!"


@pytest.fixture
def full_tweet():
    """One tweet carrying every entity type."""
    return (
        "@alice RT @bob: $AAPL up 5% today #stocks #wallstreet "
        "https://example.com/markets?src=tw via @carol/finance"
    )


@pytest.fixture
def edge_case_texts():
    """Inputs that must never make an extractor raise."""
    return [
        "",
        " ",
        "no entities here",
        "😀😀😀",
        "日本語のテキスト",
        "@",
        "#",
        "$",
        "http://",
        "@@@###$$$",
        "\n\t\r",
        "a" * 5000,
        "#" + "1" * 2000,
        "http://" + "a." * 500 + "com",
    ]


# ==========================================================================
# Extraction payloads
# ==========================================================================

@pytest.fixture
def valid_payload(multibyte_tweet):
    return {
        "hashtags": ["münchen"],
        "urls": [],
        "mentions": ["gülçin"],
        "replyto": "",
        "hashtags_with_indices": [{"hashtag": "münchen", "indices": [21, 29]}],
        "urls_with_indices": [],
        "mentions_with_indices": [{"screen_name": "gülçin", "indices": [6, 13]}],
        "cashtags": [],
        "cashtags_with_indices": [],
    }
