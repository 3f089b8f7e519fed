import marshmallow as mm

from fuelsync.errors import MalformedQuery
from .model import Query, ReceiptSelection, InputSelection, OutputSelection, FieldSelection, \
    CanonicalQuery, CanonicalReceiptSelection, CanonicalInputSelection, CanonicalOutputSelection, \
    CanonicalFieldSelection
from .schema import QUERY_SCHEMA


def normalize(query: Query) -> CanonicalQuery:
    try:
        return QUERY_SCHEMA.load(query)
    except mm.ValidationError as err:
        raise MalformedQuery('parse query', err) from err


def denormalize(query: CanonicalQuery) -> Query:
    return QUERY_SCHEMA.dump(query)
