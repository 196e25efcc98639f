"""
Selection view-model: which category and topic the reader is looking at.

A Selection is replaced wholesale on every change. The Flask session is the
owning container; load_selection/save_selection move it in and out.
"""
from dataclasses import dataclass, replace
from typing import Optional

SESSION_CATEGORY_KEY = 'active_category'
SESSION_TOPIC_KEY = 'active_topic_id'


@dataclass(frozen=True)
class Selection:
    active_category: Optional[str]
    active_topic_id: Optional[str] = None


def initial_selection(catalog, category=None, topic_id=None) -> Selection:
    """
    Starting selection for a new reader.
    Uses the preferred category/topic when present, otherwise the first
    category and its first topic, or an empty selection for an empty catalog.
    """
    if category is None or category not in catalog:
        # the preferred topic belonged to another category
        category = next(iter(catalog), None)
        topic_id = None
    if category is None:
        return Selection(None, None)
    if topic_id is None or catalog.find_topic(category, topic_id) is None:
        topic_id = catalog.first_topic_id(category)
    return Selection(category, topic_id)


def select_topic(selection, topic_id) -> Selection:
    # Unknown ids are accepted; nothing is highlighted downstream
    return replace(selection, active_topic_id=topic_id)


def select_category(selection, catalog, key) -> Selection:
    """Switch category and reset to its first topic (None when empty)"""
    first_topic_id = catalog.first_topic_id(key)
    return replace(selection, active_category=key, active_topic_id=first_topic_id)


def has_active_topic(selection, catalog) -> bool:
    if selection.active_category is None or selection.active_topic_id is None:
        return False
    return catalog.find_topic(selection.active_category, selection.active_topic_id) is not None


def load_selection(store, catalog, default_category=None, default_topic_id=None) -> Selection:
    category = store.get(SESSION_CATEGORY_KEY)
    if category is None or category not in catalog:
        return initial_selection(catalog, default_category, default_topic_id)
    return Selection(category, store.get(SESSION_TOPIC_KEY))


def save_selection(store, selection):
    store[SESSION_CATEGORY_KEY] = selection.active_category
    store[SESSION_TOPIC_KEY] = selection.active_topic_id
