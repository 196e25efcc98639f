"""
Sidebar and navbar view functions.

Both are pure: they read the catalog and the current selection and return
rows for the templates. A row click is forwarded to the caller's callback;
the selection itself is only changed by whoever owns it.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional

TOPIC_ITEM_CLASS = 'topic-item'
NAV_ITEM_CLASS = 'nav-item'


@dataclass(frozen=True)
class SidebarRow:
    topic_id: str
    title: str
    active: bool = False
    on_topic_change: Optional[Callable[[str], None]] = field(default=None, compare=False, repr=False)

    @property
    def css_class(self):
        return f'{TOPIC_ITEM_CLASS} active' if self.active else TOPIC_ITEM_CLASS

    def click(self):
        if self.on_topic_change is not None:
            self.on_topic_change(self.topic_id)


@dataclass(frozen=True)
class NavItem:
    key: str
    name: str
    active: bool = False

    @property
    def css_class(self):
        return f'{NAV_ITEM_CLASS} active' if self.active else NAV_ITEM_CLASS


def build_sidebar(catalog, active_category, active_topic_id, on_topic_change=None) -> List[SidebarRow]:
    """
    One row per topic of the active category, in catalog order.
    Raises CategoryNotFoundError when active_category is not in the catalog.
    """
    category = catalog[active_category]
    return [
        SidebarRow(
            topic_id=topic.id,
            title=topic.title,
            active=topic.id == active_topic_id,
            on_topic_change=on_topic_change,
        )
        for topic in category.topics
    ]


def build_navbar(catalog, active_category) -> List[NavItem]:
    return [
        NavItem(key=key, name=category.name, active=key == active_category)
        for key, category in catalog.items()
    ]


def sidebar_payload(rows):
    """JSON-ready form of the sidebar rows"""
    return [
        {'id': row.topic_id, 'title': row.title, 'active': row.active, 'class': row.css_class}
        for row in rows
    ]
