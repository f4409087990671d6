"""Tests for dailypage.journal.keys."""

from datetime import datetime, timezone

import pytest

from dailypage.core.exceptions import CacheCorruptError
from dailypage.journal.keys import (
    cache_key,
    decode_entry,
    decode_history,
    encode_entry,
    encode_history,
    encode_scope,
    entry_key,
    history_key,
    name_from_key,
    scope_prefix,
)
from dailypage.journal.models import Entry, WordCountSample


class TestKeyLayout:
    def test_entry_key(self):
        assert entry_key("alice@example.com", "2024-03-09") == "entry/alice%40example%2Ecom/2024-03-09"

    def test_history_key_separate_namespace(self):
        assert history_key("alice", "2024-03-09") == "history/alice/2024-03-09"

    def test_global_scope(self):
        assert cache_key("session", None, "user") == "session/_global/user"

    def test_no_cross_user_collision(self):
        users = ["a/b", "a%2Fb", "a", "a/", "..", "."]
        assert len({encode_scope(u) for u in users}) == len(users)

    def test_scope_never_dot_segment(self):
        assert encode_scope("..") not in {".", ".."}
        assert "/" not in encode_scope("../../etc")

    def test_prefix_does_not_match_other_users(self):
        assert not entry_key("alice2", "2024-03-09").startswith(scope_prefix("entry", "alice"))
        assert entry_key("alice", "2024-03-09").startswith(scope_prefix("entry", "alice"))

    def test_name_from_key(self):
        assert name_from_key(entry_key("a@b.c", "2024-03-09")) == "2024-03-09"


class TestEntryCodec:
    def test_roundtrip(self):
        stamp = datetime(2024, 3, 9, 8, 30, tzinfo=timezone.utc)
        entry = decode_entry("2024-03-09", encode_entry(Entry("2024-03-09", "hi there", updated_at=stamp)))
        assert entry.content == "hi there"
        assert entry.updated_at == stamp

    def test_without_timestamp(self):
        assert decode_entry("2024-03-09", encode_entry(Entry("2024-03-09", "x"))).updated_at is None

    @pytest.mark.parametrize("raw", ["not json", "null", "[]", '{"text": "x"}', '{"content": 5}'])
    def test_corrupt(self, raw):
        with pytest.raises(CacheCorruptError, match="2024-03-09"):
            decode_entry("2024-03-09", raw)


class TestHistoryCodec:
    def test_roundtrip(self):
        samples = [WordCountSample(1, 0), WordCountSample(2, 10)]
        assert decode_history("2024-03-09", encode_history(samples)) == samples

    @pytest.mark.parametrize("raw", ["{", '{"timestamp": 1}', '[{"timestamp": 1}]', '[{"timestamp": "x", "word_count": 1}]'])
    def test_corrupt(self, raw):
        with pytest.raises(CacheCorruptError):
            decode_history("2024-03-09", raw)
