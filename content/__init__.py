"""
Bundled topic content, grouped by category.

Each category lists its topic sources in display order. A source is a single
topic mapping or a list of them; catalog.build_catalog() concatenates and
validates them at startup.
"""
from content import cn_topics, dbms_topics, interview_topics, oop_topics, os_topics

CATEGORY_SOURCES = {
    'oop': {
        'name': 'Object-Oriented Programming',
        'topics': [oop_topics.CORE_CONCEPTS, oop_topics.DESIGN_PATTERNS],
    },
    'os': {
        'name': 'Operating Systems',
        'topics': [
            os_topics.PROCESS_MANAGEMENT,
            os_topics.SYNCHRONIZATION,
            os_topics.BANKERS_ALGORITHM_TOPICS,
        ],
    },
    'dbms': {
        'name': 'Database Management Systems',
        'topics': [dbms_topics.FUNDAMENTALS, dbms_topics.TRANSACTIONS, dbms_topics.INDEXING],
    },
    'cn': {
        'name': 'Computer Networks',
        'topics': [
            cn_topics.NETWORK_MODELS,
            cn_topics.APPLICATION_LAYER,
            cn_topics.TRANSPORT_LAYER,
            cn_topics.IMPORTANT_CONCEPTS,
        ],
    },
    'interview': {
        'name': 'Interview Questions',
        'topics': [interview_topics.INTERVIEW_PREP],
    },
}
