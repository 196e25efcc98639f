"""
Topic catalog
Builds the immutable category -> topics mapping served by the site
"""
from collections.abc import Mapping
from dataclasses import dataclass, field, asdict
from types import MappingProxyType
from typing import Optional, Tuple

from utils.validators import topic_schema, category_schema, validate_schema


class CatalogError(Exception):
    """Bundled content is malformed; raised while building the catalog"""


class CategoryNotFoundError(KeyError):
    """Requested category key is not part of the catalog"""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"Unknown category: {self.key!r}"


@dataclass(frozen=True)
class CodeExample:
    title: str
    code: str
    language: str = 'text'
    description: Optional[str] = None


@dataclass(frozen=True)
class Resource:
    title: str
    url: str
    description: str = ''


@dataclass(frozen=True)
class QuestionAnswer:
    question: str
    answer: str


@dataclass(frozen=True)
class TopicRecord:
    id: str
    title: str
    subtitle: Optional[str] = None
    summary: Optional[str] = None
    explanation: Optional[str] = None
    analogy: Optional[str] = None
    visual_concept: Optional[str] = None
    real_world_use: Optional[str] = None
    diagram: Optional[str] = None
    key_points: Tuple[str, ...] = ()
    code_examples: Tuple[CodeExample, ...] = ()
    resources: Tuple[Resource, ...] = ()
    questions: Tuple[QuestionAnswer, ...] = ()
    behavioral_questions: Tuple[QuestionAnswer, ...] = ()
    discussions: Tuple[Resource, ...] = ()

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Category:
    key: str
    name: str
    topics: Tuple[TopicRecord, ...] = field(default_factory=tuple)

    def topic_ids(self):
        return [topic.id for topic in self.topics]


class TopicCatalog(Mapping):
    """Read-only ordered mapping of category key to Category"""

    def __init__(self, categories):
        self._categories = MappingProxyType(dict(categories))

    def __getitem__(self, key):
        try:
            return self._categories[key]
        except KeyError:
            raise CategoryNotFoundError(key) from None

    def __iter__(self):
        return iter(self._categories)

    def __len__(self):
        return len(self._categories)

    def get(self, key, default=None) -> Optional[Category]:
        return self._categories.get(key, default)

    def find_topic(self, key, topic_id) -> Optional[TopicRecord]:
        category = self.get(key)
        if category is None:
            return None
        for topic in category.topics:
            if topic.id == topic_id:
                return topic
        return None

    def first_topic_id(self, key) -> Optional[str]:
        category = self[key]
        return category.topics[0].id if category.topics else None

    def as_dict(self):
        return {
            key: {'name': category.name, 'topics': [t.to_dict() for t in category.topics]}
            for key, category in self._categories.items()
        }


# ============================================================================
# BUILDERS
# ============================================================================

def concat_topics(*sources):
    """
    Concatenate topic sources in order.
    A source is either one raw topic mapping or a sequence of them.
    """
    combined = []
    for source in sources:
        if isinstance(source, Mapping):
            combined.append(source)
        else:
            combined.extend(source)
    return combined


def topic_from_dict(raw) -> TopicRecord:
    is_valid, result = validate_schema(topic_schema, raw)
    if not is_valid:
        topic_id = raw.get('id') if isinstance(raw, Mapping) else None
        raise CatalogError(f"Invalid topic {topic_id!r}: {result}")
    return TopicRecord(
        id=result['id'],
        title=result['title'],
        subtitle=result['subtitle'],
        summary=result['summary'],
        explanation=result['explanation'],
        analogy=result['analogy'],
        visual_concept=result['visual_concept'],
        real_world_use=result['real_world_use'],
        diagram=result['diagram'],
        key_points=tuple(result['key_points']),
        code_examples=tuple(CodeExample(**ex) for ex in result['code_examples']),
        resources=tuple(Resource(**r) for r in result['resources']),
        questions=tuple(QuestionAnswer(**q) for q in result['questions']),
        behavioral_questions=tuple(QuestionAnswer(**q) for q in result['behavioral_questions']),
        discussions=tuple(Resource(**d) for d in result['discussions']),
    )


def build_category(key, raw) -> Category:
    is_valid, result = validate_schema(category_schema, raw)
    if not is_valid:
        raise CatalogError(f"Invalid category {key!r}: {result}")
    topics = tuple(topic_from_dict(t) for t in concat_topics(*result['topics']))
    seen = set()
    for topic in topics:
        if topic.id in seen:
            raise CatalogError(f"Duplicate topic id {topic.id!r} in category {key!r}")
        seen.add(topic.id)
    return Category(key=key, name=result['name'], topics=topics)


def build_catalog(category_sources) -> TopicCatalog:
    """
    Validate and freeze an ordered mapping of key -> {'name', 'topics'}.
    'topics' lists sources in display order (see concat_topics).
    """
    return TopicCatalog(
        (key, build_category(key, raw)) for key, raw in category_sources.items()
    )


def default_catalog() -> TopicCatalog:
    from content import CATEGORY_SOURCES
    return build_catalog(CATEGORY_SOURCES)
