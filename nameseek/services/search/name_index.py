import logging
import threading
from collections.abc import Iterable

from nameseek.config import settings
from nameseek.models.user import UserName
from nameseek.services.search.name_trie import NameTrie

logger = logging.getLogger("nameseek.search.name_index")

# Published trie and the number of users in it, replaced together on every update
_trie: NameTrie | None = None
_user_count = 0
_write_lock = threading.Lock()


def _build(users: Iterable[UserName]) -> tuple[NameTrie, int]:
    trie = NameTrie()
    count = 0
    for user in users:
        if count >= settings.name_index_max_users:
            _warn_capped()
            break
        if not _insert_user(trie, user):
            continue
        count += 1
    logger.info("Built name trie with %d users", count)
    return trie, count


def build_name_trie(users: Iterable[UserName]) -> NameTrie:
    """Build a fresh trie from user records.

    Both the first and the last name are inserted, each pointing at the
    user's full name.
    """
    trie, _ = _build(users)
    return trie


def _warn_capped() -> None:
    logger.warning("Name index capped at %d users", settings.name_index_max_users)


def _insert_user(trie: NameTrie, user: UserName) -> bool:
    full_name = user.full_name
    if not full_name:
        logger.warning("Skipping user with no name: %r", user)
        return False
    if user.first_name:
        trie.insert(user.first_name, full_name)
    if user.last_name:
        trie.insert(user.last_name, full_name)
    return True


def _publish(trie: NameTrie | None, user_count: int) -> None:
    global _trie, _user_count
    _trie = trie
    _user_count = user_count


def get_name_trie() -> NameTrie:
    """Return the published trie, or an empty one before the first build."""
    trie = _trie
    if trie is None:
        return NameTrie()
    return trie


def rebuild_name_index(users: Iterable[UserName]) -> NameTrie:
    """Build a new trie off to the side and publish it in one swap.

    Renamed or removed users drop out here, since the trie itself never
    deletes entries.
    """
    trie, count = _build(users)
    with _write_lock:
        _publish(trie, count)
    return trie


def add_user(user: UserName) -> NameTrie:
    """Insert one user without disturbing readers.

    The published trie is copied, the copy updated and then published, so a
    reader holding the previous trie keeps a consistent view. A full index
    is left as it is.
    """
    with _write_lock:
        current = get_name_trie()
        if _user_count >= settings.name_index_max_users:
            _warn_capped()
            return current
        trie = current.copy()
        if not _insert_user(trie, user):
            return current
        _publish(trie, _user_count + 1)
    return trie


def reset_name_index() -> None:
    """Drop the published trie so the next lookup sees an empty index."""
    with _write_lock:
        _publish(None, 0)


def name_search(prefix: str, limit: int | None = None) -> list[str]:
    """Autocomplete full names for a typed prefix.

    The prefix is used as given; fragments such as "de la Cruz" contain
    spaces, so a trailing space narrows the match.
    """
    if limit is None:
        limit = settings.max_name_suggestions
    return get_name_trie().search_prefix(prefix, limit)
