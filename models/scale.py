# models/scale.py
# Storage type for Scorer.scale

import json

from sqlalchemy.types import Text, TypeDecorator

from errors import ScaleTypeMismatch

# Levels a flat scale may hold
LEVEL_TYPES = (int, float, str)


def dump_scale(value):
    """
    Serialises a scale for storage. Only a flat list of numbers/strings is
    accepted; any other shape (mapping, scalar, nested list) raises
    ScaleTypeMismatch.
    """
    if not isinstance(value, (list, tuple)):
        raise ScaleTypeMismatch(f'scale must be a flat list, got {type(value).__name__}')

    for level in value:
        if isinstance(level, bool) or not isinstance(level, LEVEL_TYPES):
            raise ScaleTypeMismatch(f'scale level {level!r} is not a number or string')

    return list(value)


class ScaleType(TypeDecorator):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return json.dumps(dump_scale(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return json.loads(value)
