"""Tests for the published name index."""

import logging

from nameseek.models.user import UserName
from nameseek.services.search import name_index


def test_full_name():
    assert UserName("Anna", "Anderson").full_name == "Anna Anderson"
    assert UserName("Cher", "").full_name == "Cher"


def test_build_name_trie_indexes_first_and_last(sample_users):
    trie = name_index.build_name_trie(sample_users)
    assert trie.search_prefix("jo") == ["John Doe", "John Smith"]
    assert trie.search_prefix("sm") == ["John Smith"]
    assert trie.search_prefix("DE") == ["maria de la Cruz"]
    assert trie.search_prefix("Ma") == ["maria de la Cruz"]


def test_build_name_trie_skips_nameless_users(caplog):
    with caplog.at_level(logging.WARNING, logger="nameseek.search.name_index"):
        trie = name_index.build_name_trie([UserName("", ""), UserName("Cher", "")])
    assert trie.search_prefix("") == ["Cher"]
    assert trie.size == 1
    assert "no name" in caplog.text


def test_build_name_trie_caps_users(monkeypatch):
    monkeypatch.setattr(name_index.settings, "name_index_max_users", 2)
    users = [UserName(f"User{i}", "Test") for i in range(5)]
    trie = name_index.build_name_trie(users)
    assert trie.search_prefix("user") == ["User0 Test", "User1 Test"]


def test_empty_index_before_build():
    assert name_index.name_search("an") == []
    assert name_index.get_name_trie().size == 0


def test_rebuild_and_search(sample_users):
    name_index.rebuild_name_index(sample_users)
    assert name_index.name_search("An") == ["Anna Anderson"]
    assert name_index.name_search("jo", limit=1) == ["John Doe"]


def test_rebuild_drops_stale_entries(sample_users):
    name_index.rebuild_name_index(sample_users)
    renamed = [u for u in sample_users if u.first_name != "Anna"] + [
        UserName("Anna", "Berg")
    ]
    name_index.rebuild_name_index(renamed)
    assert name_index.name_search("an") == ["Anna Berg"]


def test_add_user_is_copy_on_write(sample_users):
    before = name_index.rebuild_name_index(sample_users)
    after = name_index.add_user(UserName("Johanna", "Lee"))

    assert after is not before
    assert before.search_prefix("joh") == ["John Doe", "John Smith"]
    assert name_index.name_search("joh") == ["Johanna Lee", "John Doe", "John Smith"]


def test_add_user_without_name_keeps_published_trie(sample_users):
    before = name_index.rebuild_name_index(sample_users)
    assert name_index.add_user(UserName("", "")) is before
    assert name_index.get_name_trie() is before


def test_name_search_default_limit(monkeypatch):
    monkeypatch.setattr(name_index.settings, "max_name_suggestions", 3)
    name_index.rebuild_name_index(UserName("Kim", f"No{i}") for i in range(10))
    assert len(name_index.name_search("kim")) == 3


def test_name_search_keeps_spaces_in_prefix():
    name_index.rebuild_name_index([UserName("maria", "de la Cruz"), UserName("Dean", "Smith")])
    assert name_index.name_search("de") == ["Dean Smith", "maria de la Cruz"]
    assert name_index.name_search("de ") == ["maria de la Cruz"]
    assert name_index.name_search("DE LA c") == ["maria de la Cruz"]
    assert name_index.name_search(" de") == []


def test_add_user_respects_user_cap(monkeypatch, caplog):
    monkeypatch.setattr(name_index.settings, "name_index_max_users", 2)
    full = name_index.rebuild_name_index([UserName("Ada", "Byron"), UserName("Alan", "Turing")])

    with caplog.at_level(logging.WARNING, logger="nameseek.search.name_index"):
        for user in [UserName("Grace", "Hopper"), UserName("Linus", "Torvalds")]:
            assert name_index.add_user(user) is full

    assert name_index.get_name_trie() is full
    assert name_index.name_search("", limit=100) == ["Ada Byron", "Alan Turing"]
    assert "capped at 2 users" in caplog.text


def test_add_user_counts_toward_cap(monkeypatch):
    monkeypatch.setattr(name_index.settings, "name_index_max_users", 2)
    name_index.add_user(UserName("Ada", "Byron"))
    name_index.add_user(UserName("", ""))
    name_index.add_user(UserName("Alan", "Turing"))
    name_index.add_user(UserName("Grace", "Hopper"))
    assert name_index.name_search("", limit=100) == ["Ada Byron", "Alan Turing"]
