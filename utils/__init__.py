from utils.logger import logger, configure_logging
from utils.cache import CacheManager, cached
from utils.validators import (
    validate_schema, topic_schema, category_schema,
    topic_selection_schema, category_selection_schema
)

__all__ = [
    'logger', 'configure_logging', 'CacheManager', 'cached', 'validate_schema',
    'topic_schema', 'category_schema', 'topic_selection_schema',
    'category_selection_schema',
]
