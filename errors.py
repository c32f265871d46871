# errors.py
# Outcomes of scorer mutations that are not plain success

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from sqlalchemy.exc import DontWrapMixin

# {field: [error codes]}
FieldErrors = Dict[str, List[str]]

# Code attached to `scale` when the storage layer refused to serialise it
INVALID_TYPE = 'invalid-type'

# Reference kind -> (singular, plural)
KIND_NOUNS = {
    'users': ('user', 'users'),
    'cases': ('case', 'cases'),
    'queries': ('query', 'queries'),
    'teams': ('team', 'teams'),
}


class ScaleTypeMismatch(DontWrapMixin, TypeError):
    """
    Raised by the scale column type when a value cannot be stored.
    SQLAlchemy re-raises it as is instead of wrapping it in StatementError.
    """


def pluralize(kind, count):
    singular, plural = KIND_NOUNS.get(kind, (kind, kind))
    return singular if count == 1 else plural


def to_sentence(words):
    words = [str(w) for w in words]
    if len(words) <= 1:
        return ''.join(words)
    if len(words) == 2:
        return f'{words[0]} and {words[1]}'
    return ', '.join(words[:-1]) + f', and {words[-1]}'


@dataclass(frozen=True)
class Forbidden:
    message: str
    status_code: int = 403

    def to_dict(self):
        return {'error': self.message}


@dataclass(frozen=True)
class NotFound:
    message: str = 'Not Found!'
    status_code: int = 404

    def to_dict(self):
        return {'error': self.message}


@dataclass(frozen=True)
class DeletionBlocked:
    """A reference of `kind` still points at the scorer being deleted."""

    kind: str
    count: int
    sample: Tuple[str, ...] = field(default_factory=tuple)
    status_code: int = 400

    @property
    def message(self):
        if self.kind == 'system':
            return 'Cannot delete the system default scorer'

        noun = pluralize(self.kind, self.count)
        sample = to_sentence(self.sample)
        if self.kind == 'teams':
            return f'Cannot delete the scorer because it is shared with {self.count} {noun}: [{sample}]'
        return f'Cannot delete the scorer because it is the default for {self.count} {noun}: [{sample}]'

    def to_dict(self):
        return {'error': self.message}
