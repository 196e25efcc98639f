"""
Input validation schemas
Covers bundled topic content (checked once at startup) and selection requests
"""
from marshmallow import Schema, ValidationError, fields, pre_load, validate

TOPIC_ID_PATTERN = r'^[A-Za-z0-9][A-Za-z0-9_\-]*$'


# ============================================================================
# CONTENT SCHEMAS
# ============================================================================

class CodeExampleSchema(Schema):
    title = fields.String(required=True, validate=validate.Length(min=1))
    language = fields.String(load_default='text')
    code = fields.String(required=True)
    description = fields.String(load_default=None, allow_none=True)

    @pre_load
    def accept_content_alias(self, data, **kwargs):
        # Some examples ship pre-rendered markup under 'content' instead of 'code'
        if isinstance(data, dict) and 'code' not in data and 'content' in data:
            data = dict(data)
            data['code'] = data.pop('content')
            data.setdefault('language', 'html')
        return data


class ResourceSchema(Schema):
    title = fields.String(required=True, validate=validate.Length(min=1))
    url = fields.Url(required=True)
    description = fields.String(load_default='')


class QuestionSchema(Schema):
    question = fields.String(required=True, validate=validate.Length(min=1))
    answer = fields.String(required=True)


class TopicSchema(Schema):
    """Shape of one topic record in the bundled content modules"""
    id = fields.String(required=True, validate=validate.Regexp(TOPIC_ID_PATTERN))
    title = fields.String(required=True, validate=validate.Length(min=1))
    subtitle = fields.String(load_default=None, allow_none=True)
    summary = fields.String(load_default=None, allow_none=True)
    explanation = fields.String(load_default=None, allow_none=True)
    analogy = fields.String(load_default=None, allow_none=True)
    visual_concept = fields.String(load_default=None, allow_none=True)
    real_world_use = fields.String(load_default=None, allow_none=True)
    diagram = fields.String(load_default=None, allow_none=True)
    key_points = fields.List(fields.String(), load_default=list)
    code_examples = fields.List(fields.Nested(CodeExampleSchema), load_default=list)
    resources = fields.List(fields.Nested(ResourceSchema), load_default=list)
    questions = fields.List(fields.Nested(QuestionSchema), load_default=list)
    behavioral_questions = fields.List(fields.Nested(QuestionSchema), load_default=list)
    discussions = fields.List(fields.Nested(ResourceSchema), load_default=list)


class CategorySchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    topics = fields.List(fields.Raw(), required=True)


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class TopicSelectionSchema(Schema):
    """Sidebar click: replace the active topic id"""
    topic_id = fields.String(required=True, validate=[
        validate.Length(min=1, max=128),
        validate.Regexp(TOPIC_ID_PATTERN),
    ])
    category = fields.String(load_default=None, allow_none=True,
                             validate=validate.Length(min=1, max=64))


class CategorySelectionSchema(Schema):
    """Navbar click: replace the active category"""
    category = fields.String(required=True, validate=[
        validate.Length(min=1, max=64),
        validate.Regexp(TOPIC_ID_PATTERN),
    ])


topic_schema = TopicSchema()
category_schema = CategorySchema()
topic_selection_schema = TopicSelectionSchema()
category_selection_schema = CategorySelectionSchema()


def validate_schema(schema, data):
    """
    Validate data against a marshmallow schema.
    Returns (True, loaded_data) or (False, error_messages).
    """
    try:
        result = schema.load(data)
        return True, result
    except ValidationError as err:
        return False, err.messages
