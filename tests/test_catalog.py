"""
Tests for the topic catalog, selection view-model and sidebar
"""
import dataclasses
import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catalog import (
    build_catalog, concat_topics, default_catalog, topic_from_dict,
    CatalogError, CategoryNotFoundError
)
from selection import (
    Selection, initial_selection, select_topic, select_category,
    has_active_topic, load_selection, save_selection
)
from sidebar import build_sidebar, build_navbar, sidebar_payload
from topic_view import explanation_blocks, topic_sections


@pytest.fixture
def net_catalog():
    return build_catalog({
        'net': {
            'name': 'Networking',
            'topics': [{'id': 'a', 'title': 'DHCP'}, {'id': 'b', 'title': 'DNS'}],
        },
        'empty': {'name': 'Nothing Yet', 'topics': []},
    })


# ============================================================================
# CATALOG TESTS
# ============================================================================

class TestCatalogBuilder:
    """Test suite for catalog composition"""

    def test_concat_preserves_order(self):
        """Test single records and lists are flattened in order"""
        first = {'id': 'a', 'title': 'A'}
        group = [{'id': 'b', 'title': 'B'}, {'id': 'c', 'title': 'C'}]
        last = {'id': 'd', 'title': 'D'}

        combined = concat_topics(first, group, last)
        assert [t['id'] for t in combined] == ['a', 'b', 'c', 'd']

    def test_category_sources_are_concatenated(self):
        catalog = build_catalog({
            'os': {'name': 'OS', 'topics': [[{'id': 'x', 'title': 'X'}], {'id': 'y', 'title': 'Y'}]},
        })
        assert catalog['os'].topic_ids() == ['x', 'y']

    def test_duplicate_ids_rejected(self):
        """Test duplicate ids inside one category fail the build"""
        with pytest.raises(CatalogError, match='Duplicate topic id'):
            build_catalog({
                'net': {'name': 'Net', 'topics': [{'id': 'a', 'title': 'A'}, {'id': 'a', 'title': 'B'}]},
            })

    def test_same_id_in_different_categories_allowed(self):
        catalog = build_catalog({
            'one': {'name': 'One', 'topics': [{'id': 'a', 'title': 'A'}]},
            'two': {'name': 'Two', 'topics': [{'id': 'a', 'title': 'A'}]},
        })
        assert len(catalog) == 2

    def test_malformed_topic_rejected(self):
        with pytest.raises(CatalogError):
            build_catalog({'net': {'name': 'Net', 'topics': [{'id': 'a', 'title': ''}]}})

    def test_malformed_category_rejected(self):
        with pytest.raises(CatalogError):
            build_catalog({'net': {'topics': []}})

    def test_topic_record_shape(self):
        topic = topic_from_dict({
            'id': 'dns',
            'title': 'DNS',
            'key_points': ['Port 53'],
            'questions': [{'question': 'Q?', 'answer': 'A.'}],
            'code_examples': [{'title': 'Lookup', 'language': 'bash', 'code': 'dig example.com'}],
        })
        assert topic.key_points == ('Port 53',)
        assert topic.questions[0].answer == 'A.'
        assert topic.code_examples[0].language == 'bash'
        assert topic.summary is None

    def test_records_are_immutable(self, net_catalog):
        topic = net_catalog['net'].topics[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            topic.title = 'Changed'
        with pytest.raises(TypeError):
            net_catalog['net'] = None

    def test_lookups(self, net_catalog):
        """Test optional and raising category lookups"""
        assert net_catalog.get('missing') is None
        with pytest.raises(CategoryNotFoundError):
            net_catalog['missing']
        with pytest.raises(KeyError):
            net_catalog['missing']
        assert 'missing' not in net_catalog
        assert net_catalog.find_topic('net', 'b').title == 'DNS'
        assert net_catalog.find_topic('net', 'zzz') is None
        assert net_catalog.find_topic('missing', 'a') is None
        assert net_catalog.first_topic_id('net') == 'a'
        assert net_catalog.first_topic_id('empty') is None

    def test_as_dict(self, net_catalog):
        data = net_catalog.as_dict()
        assert list(data) == ['net', 'empty']
        assert data['net']['topics'][1]['title'] == 'DNS'


class TestDefaultCatalog:
    """Test suite for the bundled content"""

    def test_categories_in_order(self):
        catalog = default_catalog()
        assert list(catalog) == ['oop', 'os', 'dbms', 'cn', 'interview']

    def test_every_category_has_topics(self):
        for key, category in default_catalog().items():
            assert category.topics, f"{key} should not be empty"
            ids = category.topic_ids()
            assert len(ids) == len(set(ids))

    def test_default_landing_topic_exists(self):
        assert default_catalog().find_topic('oop', 'encapsulation') is not None


# ============================================================================
# SELECTION TESTS
# ============================================================================

class TestSelection:
    """Test suite for the selection view-model"""

    def test_initial_selection_defaults(self, net_catalog):
        assert initial_selection(net_catalog) == Selection('net', 'a')
        assert initial_selection(net_catalog, 'net', 'b') == Selection('net', 'b')

    def test_initial_selection_unknown_preferences(self, net_catalog):
        assert initial_selection(net_catalog, 'gone', 'b') == Selection('net', 'a')
        assert initial_selection(net_catalog, 'net', 'zzz') == Selection('net', 'a')

    def test_initial_selection_empty_catalog(self):
        assert initial_selection(build_catalog({})) == Selection(None, None)

    def test_select_topic_replaces(self):
        before = Selection('net', 'a')
        after = select_topic(before, 'b')
        assert after == Selection('net', 'b')
        assert before == Selection('net', 'a')

    def test_select_unknown_topic_allowed(self, net_catalog):
        selection = select_topic(Selection('net', 'a'), 'nope')
        assert selection.active_topic_id == 'nope'
        assert has_active_topic(selection, net_catalog) is False

    def test_select_category_resets_topic(self, net_catalog):
        selection = select_category(Selection('empty', None), net_catalog, 'net')
        assert selection == Selection('net', 'a')

    def test_select_empty_category(self, net_catalog):
        selection = select_category(Selection('net', 'b'), net_catalog, 'empty')
        assert selection == Selection('empty', None)
        assert has_active_topic(selection, net_catalog) is False

    def test_select_unknown_category(self, net_catalog):
        with pytest.raises(CategoryNotFoundError):
            select_category(Selection('net', 'a'), net_catalog, 'missing')

    def test_session_round_trip(self, net_catalog):
        store = {}
        save_selection(store, Selection('net', 'b'))
        assert load_selection(store, net_catalog) == Selection('net', 'b')

    def test_load_without_stored_selection(self, net_catalog):
        assert load_selection({}, net_catalog, 'net', 'b') == Selection('net', 'b')
        stale = {'active_category': 'removed', 'active_topic_id': 'x'}
        assert load_selection(stale, net_catalog) == Selection('net', 'a')


# ============================================================================
# SIDEBAR TESTS
# ============================================================================

class TestSidebar:
    """Test suite for the sidebar view"""

    def test_scenario_net(self, net_catalog):
        """Test titles, active flag and click for the networking example"""
        clicks = []
        rows = build_sidebar(net_catalog, 'net', 'b', on_topic_change=clicks.append)

        assert [row.title for row in rows] == ['DHCP', 'DNS']
        assert [row.active for row in rows] == [False, True]
        assert rows[1].css_class == 'topic-item active'
        assert rows[0].css_class == 'topic-item'

        rows[0].click()
        assert clicks == ['a']

    def test_rows_match_topics(self):
        catalog = default_catalog()
        for key, category in catalog.items():
            rows = build_sidebar(catalog, key, None)
            assert [row.topic_id for row in rows] == category.topic_ids()
            assert not any(row.active for row in rows)

    def test_at_most_one_active(self):
        catalog = default_catalog()
        for topic_id in catalog['cn'].topic_ids():
            rows = build_sidebar(catalog, 'cn', topic_id)
            assert [row.topic_id for row in rows if row.active] == [topic_id]

    def test_unknown_topic_marks_nothing(self, net_catalog):
        rows = build_sidebar(net_catalog, 'net', 'zzz')
        assert not any(row.active for row in rows)

    def test_rendering_is_idempotent(self, net_catalog):
        assert build_sidebar(net_catalog, 'net', 'a') == build_sidebar(net_catalog, 'net', 'a')

    def test_click_does_not_change_selection(self, net_catalog):
        selection = Selection('net', 'a')
        clicks = []
        rows = build_sidebar(net_catalog, selection.active_category,
                             selection.active_topic_id, on_topic_change=clicks.append)
        rows[1].click()
        assert clicks == ['b']
        assert selection == Selection('net', 'a')
        assert rows[0].active is True

    def test_empty_category(self, net_catalog):
        clicks = []
        rows = build_sidebar(net_catalog, 'empty', None, on_topic_change=clicks.append)
        assert rows == []
        assert clicks == []

    def test_missing_category_raises(self, net_catalog):
        with pytest.raises(CategoryNotFoundError):
            build_sidebar(net_catalog, 'missing', 'a')

    def test_click_without_callback(self, net_catalog):
        build_sidebar(net_catalog, 'net', 'a')[0].click()

    def test_navbar(self, net_catalog):
        items = build_navbar(net_catalog, 'empty')
        assert [item.key for item in items] == ['net', 'empty']
        assert [item.css_class for item in items] == ['nav-item', 'nav-item active']

    def test_payload(self, net_catalog):
        payload = sidebar_payload(build_sidebar(net_catalog, 'net', 'a'))
        assert payload[0] == {'id': 'a', 'title': 'DHCP', 'active': True, 'class': 'topic-item active'}


# ============================================================================
# TOPIC VIEW TESTS
# ============================================================================

class TestTopicView:
    """Test suite for topic detail helpers"""

    def test_explanation_blocks(self):
        text = "\nKey Components:\n- Server\n• Client\n\nPlain sentence here.\n"
        blocks = explanation_blocks(text)
        assert [(b.kind, b.text) for b in blocks] == [
            ('heading', 'Key Components:'),
            ('list_item', 'Server'),
            ('list_item', 'Client'),
            ('paragraph', 'Plain sentence here.'),
        ]

    def test_long_colon_line_is_paragraph(self):
        line = 'x' * 120 + ':'
        assert explanation_blocks(line)[0].kind == 'paragraph'

    def test_empty_explanation(self):
        assert explanation_blocks('') == []
        assert explanation_blocks(None) == []

    def test_sections_skip_empty_fields(self):
        topic = topic_from_dict({'id': 'a', 'title': 'A', 'summary': 'S', 'key_points': ['k']})
        sections = topic_sections(topic)
        assert [s.kind for s in sections] == ['summary', 'key_points']
        assert sections[1].layout == 'default'

    def test_section_order(self):
        catalog = default_catalog()
        topic = catalog.find_topic('interview', 'interview-questions')
        kinds = [s.kind for s in topic_sections(topic)]
        assert kinds == ['summary', 'analogy', 'key_points', 'questions', 'behavioral_questions']

    def test_discussion_layout(self):
        catalog = default_catalog()
        topic = catalog.find_topic('interview', 'interview-discussions')
        sections = {s.kind: s for s in topic_sections(topic)}
        assert sections['key_points'].layout == 'discussion'
        assert sections['resources'].heading == 'Discussion Platforms'

    def test_platform_topic_keeps_default_discussion_links(self):
        topic = topic_from_dict({
            'id': 'interview-discussions', 'title': 'Platforms',
            'key_points': ['Ask'], 'resources': [{'title': 'R', 'url': 'https://example.com'}],
            'discussions': [{'title': 'D', 'url': 'https://example.com/d'}],
        })
        sections = {s.kind: s for s in topic_sections(topic)}
        assert sections['key_points'].layout == 'discussion'
        assert sections['resources'].layout == 'discussion'
        assert sections['discussions'].layout == 'default'

    def test_community_links_keep_default_points_and_resources(self):
        topic = topic_from_dict({
            'id': 'community-discussion-links', 'title': 'Community',
            'key_points': ['Read'], 'resources': [{'title': 'R', 'url': 'https://example.com'}],
            'discussions': [{'title': 'D', 'url': 'https://example.com/d'}],
        })
        sections = {s.kind: s for s in topic_sections(topic)}
        assert sections['key_points'].layout == 'default'
        assert sections['resources'].layout == 'default'
        assert sections['resources'].heading == 'Learning Resources'
        assert sections['discussions'].layout == 'discussion'
