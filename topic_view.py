"""
Topic detail view helpers
Decides which sections of a topic are shown and how explanations are split
"""
from dataclasses import dataclass
from typing import List

# Key points and resources of this topic use the compact "discussion" layout
PLATFORM_TOPIC_ID = 'interview-discussions'
# Discussion links of this topic use it too
COMMUNITY_LINKS_TOPIC_ID = 'community-discussion-links'

HEADING_MAX_LENGTH = 100
LIST_MARKERS = ('- ', '• ')


@dataclass(frozen=True)
class ExplanationBlock:
    kind: str  # 'heading' | 'list_item' | 'paragraph'
    text: str


@dataclass(frozen=True)
class Section:
    kind: str
    heading: str
    layout: str = 'default'


def explanation_blocks(text) -> List[ExplanationBlock]:
    blocks = []
    for line in (text or '').split('\n'):
        trimmed = line.strip()
        if not trimmed:
            continue
        if trimmed.endswith(':') and len(trimmed) < HEADING_MAX_LENGTH:
            blocks.append(ExplanationBlock('heading', trimmed))
        elif trimmed.startswith(LIST_MARKERS):
            blocks.append(ExplanationBlock('list_item', trimmed[2:]))
        else:
            blocks.append(ExplanationBlock('paragraph', trimmed))
    return blocks


def _layout(matches):
    return 'discussion' if matches else 'default'


def topic_sections(topic) -> List[Section]:
    """Ordered sections present on a topic; empty fields are skipped"""
    sections = []
    if topic.summary:
        sections.append(Section('summary', 'Quick Summary'))
    if topic.explanation:
        sections.append(Section('explanation', 'Detailed Explanation'))
    if topic.analogy:
        sections.append(Section('analogy', 'Real-World Analogy'))
    if topic.key_points:
        sections.append(Section('key_points', 'Key Points', _layout(topic.id == PLATFORM_TOPIC_ID)))
    if topic.diagram:
        sections.append(Section('diagram', 'Visual Diagram'))
    if topic.code_examples:
        sections.append(Section('code_examples', 'Code Examples'))
    if topic.resources:
        platforms = topic.id == PLATFORM_TOPIC_ID
        heading = 'Discussion Platforms' if platforms else 'Learning Resources'
        sections.append(Section('resources', heading, _layout(platforms)))
    if topic.questions:
        sections.append(Section(
            'questions', f'Technical Interview Questions ({len(topic.questions)})'))
    if topic.behavioral_questions:
        sections.append(Section(
            'behavioral_questions',
            f'Behavioral & Communication Questions ({len(topic.behavioral_questions)})'))
    if topic.discussions:
        sections.append(Section(
            'discussions', 'Discussion Links', _layout(topic.id == COMMUNITY_LINKS_TOPIC_ID)))
    return sections
