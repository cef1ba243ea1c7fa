from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError
from typing import Optional

from utils.errors import BadRequestError

def _positive_int(value, name):
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        number = 0
    if number < 1:
        raise PydanticCustomError('positive_int', '{name} must be a positive integer', {'name': name})
    return number

def _book_code(value, name='book'):
    code = str(value).strip().upper()
    if not code:
        raise PydanticCustomError('required', '{name} is required', {'name': name})
    return code

def _blank_to_none(value):
    if value is None or str(value).strip() == '':
        return None
    return value

class QueryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

class BookQuery(QueryModel):
    book: str

    @field_validator('book', mode='before')
    @classmethod
    def normalize_book(cls, v):
        return _book_code(v)

class ChapterQuery(BookQuery):
    chapter: int

    @field_validator('chapter', mode='before')
    @classmethod
    def check_chapter(cls, v):
        return _positive_int(v, 'chapter')

class VerseQuery(ChapterQuery):
    verse: int

    @field_validator('verse', mode='before')
    @classmethod
    def check_verse(cls, v):
        return _positive_int(v, 'verse')

class RangeQuery(BookQuery):
    from_: int = Field(alias='from')
    to: int

    @field_validator('from_', mode='before')
    @classmethod
    def check_from(cls, v):
        return _positive_int(v, 'from')

    @field_validator('to', mode='before')
    @classmethod
    def check_to(cls, v):
        return _positive_int(v, 'to')

    @model_validator(mode='after')
    def check_order(self):
        if self.to < self.from_:
            raise PydanticCustomError('range_order', 'to must be greater than or equal to from')
        return self

class RandomVerseQuery(QueryModel):
    book: Optional[str] = None
    chapter: Optional[int] = None
    seed: Optional[str] = None

    @field_validator('book', mode='before')
    @classmethod
    def normalize_book(cls, v):
        v = _blank_to_none(v)
        return None if v is None else _book_code(v)

    @field_validator('chapter', mode='before')
    @classmethod
    def check_chapter(cls, v):
        v = _blank_to_none(v)
        return None if v is None else _positive_int(v, 'chapter')

    @field_validator('seed', mode='before')
    @classmethod
    def check_seed(cls, v):
        return _blank_to_none(v)

class SearchQuery(QueryModel):
    q: str = Field(default='', validate_default=True)
    book: Optional[str] = None
    limit: Optional[int] = None

    @field_validator('q', mode='before')
    @classmethod
    def check_q(cls, v):
        q = str(v).strip()
        if len(q) < 2:
            raise PydanticCustomError('q_too_short', 'q must be at least 2 characters')
        return q

    @field_validator('book', mode='before')
    @classmethod
    def normalize_book(cls, v):
        v = _blank_to_none(v)
        return None if v is None else _book_code(v)

    @field_validator('limit', mode='before')
    @classmethod
    def check_limit(cls, v):
        v = _blank_to_none(v)
        return None if v is None else _positive_int(v, 'limit')

def validation_message(exc: ValidationError):
    """First validation error as a short human-readable message."""
    error = exc.errors()[0]
    if error['type'] == 'missing':
        name = error['loc'][0] if error['loc'] else 'parameter'
        return f"{name} is required"
    return error['msg']

def parse_query(schema, args):
    """Validate request args against `schema`; raise BadRequestError on failure."""
    params = args.to_dict() if hasattr(args, 'to_dict') else dict(args)
    try:
        return schema.model_validate(params)
    except ValidationError as e:
        raise BadRequestError(validation_message(e))
