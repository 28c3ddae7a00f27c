"""Tests for the request builders and ClientConfig.

All requests are built, never sent.
"""

from unittest.mock import patch

import httpx
import pytest
from xapi_fields.config import DEFAULT_BASE_URL, ClientConfig
from xapi_fields.endpoints import (
    get_tweet,
    get_tweets,
    get_user,
    get_user_by_username,
    get_user_tweets,
    get_users,
    get_users_by_usernames,
)
from xapi_fields.errors import RequestValidationError, SchemaViolation
from xapi_fields.schema import TWEET
from xapi_fields.selectors import ExpansionSelector, FieldSelector


class TestUserEndpoints:
    def test_get_user_scenario(self, user_fields, pinned_tweet_expansion):
        request = get_user("2244994945", user_fields, pinned_tweet_expansion)
        assert isinstance(request, httpx.Request)
        assert request.method == "GET"
        assert request.url.path == "/2/users/2244994945"
        assert list(request.url.params.multi_items()) == [
            ("user.fields", "created_at,protected"),
            ("expansions", "pinned_tweet_id"),
            ("tweet.fields", "created_at"),
        ]

    def test_get_user_without_selection(self):
        request = get_user("1")
        assert str(request.url) == "https://api.x.com/2/users/1"

    def test_get_users_joins_ids(self, user_fields):
        request = get_users(["1", "2", "1"], user_fields)
        assert request.url.path == "/2/users"
        assert request.url.params["ids"] == "1,2"
        assert list(request.url.params.keys()) == ["user.fields", "ids"]

    def test_get_user_by_username_strips_at(self):
        request = get_user_by_username("@XDevelopers")
        assert request.url.path == "/2/users/by/username/XDevelopers"

    def test_get_users_by_usernames(self):
        request = get_users_by_usernames(["@a", "b"])
        assert request.url.path == "/2/users/by"
        assert request.url.params["usernames"] == "a,b"

    def test_wrong_root_selector(self):
        with pytest.raises(SchemaViolation, match="returns user objects"):
            get_user("1", FieldSelector.of(TWEET, "lang"))


class TestTweetEndpoints:
    def test_get_tweet_merges_tweet_fields(self):
        request = get_tweet(
            "20",
            FieldSelector.of(TWEET, "created_at"),
            ExpansionSelector.empty(TWEET).add("referenced_tweets.id", ["lang"]),
        )
        assert request.url.params.get_list("tweet.fields") == ["created_at,lang"]

    def test_get_tweets(self):
        request = get_tweets(["20", "21"])
        assert request.url.path == "/2/tweets"
        assert request.url.params["ids"] == "20,21"

    def test_get_user_tweets_passes_paging(self):
        request = get_user_tweets(
            "9876543210",
            FieldSelector.of(TWEET, "public_metrics", "created_at"),
            None,
            ("max_results", 100),
            ("pagination_token", "abc"),
        )
        assert request.url.path == "/2/users/9876543210/tweets"
        assert list(request.url.params.multi_items()) == [
            ("tweet.fields", "created_at,public_metrics"),
            ("max_results", "100"),
            ("pagination_token", "abc"),
        ]


class TestIdentifierValidation:
    @pytest.mark.parametrize("bad", ["", "   ", "1/2"])
    def test_bad_single_id(self, bad):
        with pytest.raises(RequestValidationError):
            get_user(bad)

    def test_empty_id_list(self):
        with pytest.raises(RequestValidationError, match="at least one"):
            get_tweets([])

    def test_id_limit(self):
        config = ClientConfig(max_ids_per_request=2)
        with pytest.raises(RequestValidationError, match="at most 2"):
            get_tweets(["1", "2", "3"], config=config)

    def test_single_string_treated_as_one_id(self):
        request = get_tweets("42")  # type: ignore[arg-type]
        assert request.url.params["ids"] == "42"

    def test_single_username_string_treated_as_one_name(self):
        request = get_users_by_usernames("@jack")  # type: ignore[arg-type]
        assert request.url.params["usernames"] == "jack"

    def test_none_username_entry(self):
        with pytest.raises(RequestValidationError, match="usernames must be non-empty"):
            get_users_by_usernames(["a", None])  # type: ignore[list-item]

    def test_none_username(self):
        with pytest.raises(RequestValidationError, match="username must be non-empty"):
            get_user_by_username(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("bad", ["1?x=2", "1#a"])
    def test_query_and_fragment_characters_rejected(self, bad):
        with pytest.raises(RequestValidationError, match="must not contain"):
            get_tweet(bad)

    def test_reserved_characters_rejected_in_username(self):
        with pytest.raises(RequestValidationError):
            get_user_by_username("jack?x=1")


class TestClientConfig:
    def test_defaults(self, clean_env):
        config = ClientConfig.from_env()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.max_ids_per_request == 100

    def test_env_overrides(self):
        env = {"X_API_BASE_URL": "http://localhost:8080/2", "X_API_MAX_IDS": "5"}
        with patch.dict("os.environ", env):
            config = ClientConfig.from_env()
        assert config.base_url == "http://localhost:8080/2/"
        assert config.max_ids_per_request == 5

    def test_bad_max_ids_falls_back(self):
        with patch.dict("os.environ", {"X_API_MAX_IDS": "lots"}):
            assert ClientConfig.from_env().max_ids_per_request == 100

    @pytest.mark.parametrize("raw", ["0", "-1"])
    def test_non_positive_max_ids_falls_back(self, raw):
        with patch.dict("os.environ", {"X_API_MAX_IDS": raw}):
            assert ClientConfig.from_env().max_ids_per_request == 100

    def test_non_positive_max_ids_rejected(self):
        with pytest.raises(ValueError):
            ClientConfig(max_ids_per_request=0)

    def test_custom_base_url_used(self):
        config = ClientConfig(base_url="http://localhost:8080/2")
        request = get_user("1", config=config)
        assert str(request.url) == "http://localhost:8080/2/users/1"
