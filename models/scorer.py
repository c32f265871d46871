# models/scorer.py

import logging
from datetime import datetime

from flask import current_app

from extensions import db
from .scale import ScaleType, dump_scale
from .user import User

logger = logging.getLogger(__name__)

DEFAULT_SCORER_CODE = (
    "var k = 10;\n"
    "var score = avgQuery(k);\n"
    "setScore(score);\n"
)


def _is_number(level):
    if isinstance(level, bool):
        return False
    if isinstance(level, (int, float)):
        return True
    try:
        float(level)
        return True
    except (TypeError, ValueError):
        return False


TRUE_STRINGS = ('1', 't', 'true', 'y', 'yes', 'on')
FALSE_STRINGS = ('0', 'f', 'false', 'n', 'no', 'off')


def to_boolean(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise ValueError(f'not a boolean: {value!r}')


def to_integer(value):
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValueError(f'not an integer: {value!r}')
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value)
    raise ValueError(f'not an integer: {value!r}')


def to_text(value):
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f'not a string: {value!r}')


# field -> (caster, error code when the cast fails)
CASTS = {
    'communal': (to_boolean, 'not-boolean'),
    'manual_max_score': (to_boolean, 'not-boolean'),
    'show_scale_labels': (to_boolean, 'not-boolean'),
    'query_test': (to_boolean, 'not-boolean'),
    'manual_max_score_value': (to_integer, 'not-integer'),
    'query_id': (to_integer, 'not-integer'),
    'name': (to_text, 'invalid-type'),
    'code': (to_text, 'invalid-type'),
}


class Scorer(db.Model):
    __tablename__ = 'scorers'

    # Keys a caller may set through create/update
    ATTRIBUTES = (
        'code',
        'name',
        'query_test',
        'query_id',
        'manual_max_score',
        'manual_max_score_value',
        'show_scale_labels',
        'communal',
        'scale',
        'scale_with_labels',
    )

    id = db.Column(db.Integer, primary_key=True)
    owner_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    communal = db.Column(db.Boolean, nullable=False, default=False)
    name = db.Column(db.String(255), nullable=True)
    code = db.Column(db.Text, nullable=True)
    scale = db.Column(ScaleType, nullable=True)
    scale_with_labels = db.Column(db.JSON, nullable=True)
    manual_max_score = db.Column(db.Boolean, nullable=False, default=False)
    manual_max_score_value = db.Column(db.Integer, nullable=True)
    show_scale_labels = db.Column(db.Boolean, nullable=False, default=False)
    query_test = db.Column(db.Boolean, nullable=False, default=False)
    query_id = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = db.relationship('User', foreign_keys=[owner_id], backref=db.backref('owned_scorers', lazy=True))

    def apply(self, attrs):
        """
        Copies the allowed keys of attrs onto the record. Unknown keys are
        ignored; values that cannot be cast to the column type are skipped
        and reported by validate().

        Raises ScaleTypeMismatch, before anything is assigned, when the scale
        cannot be stored.
        """
        if attrs.get('scale') is not None:
            dump_scale(attrs['scale'])

        self._type_errors = {}
        for key in self.ATTRIBUTES:
            if key not in attrs:
                continue

            value = attrs[key]
            if key in CASTS:
                cast, code = CASTS[key]
                try:
                    value = cast(value)
                except (TypeError, ValueError):
                    self._type_errors.setdefault(key, []).append(code)
                    continue

            setattr(self, key, value)
        return self

    def validate(self):
        """Field-level validation, run before every write. Returns {field: [codes]}."""
        errors = {key: list(codes) for key, codes in getattr(self, '_type_errors', {}).items()}

        if 'name' not in errors and not (self.name or '').strip():
            errors.setdefault('name', []).append('blank')

        if isinstance(self.scale, (list, tuple)) and not all(_is_number(level) for level in self.scale):
            errors.setdefault('scale', []).append('not-numeric')

        if self.manual_max_score and 'manual_max_score_value' not in errors:
            value = self.manual_max_score_value
            if value is None or value <= 0:
                errors.setdefault('manual_max_score_value', []).append('greater-than-zero')

        return errors

    def to_dict(self):
        return {
            'scorer_id': self.id,
            'owner_id': self.owner_id,
            'communal': self.communal,
            'name': self.name,
            'code': self.code,
            'scale': self.scale,
            'scale_with_labels': self.scale_with_labels,
            'manual_max_score': self.manual_max_score,
            'manual_max_score_value': self.manual_max_score_value,
            'show_scale_labels': self.show_scale_labels,
            'query_test': self.query_test,
            'query_id': self.query_id,
            'teams': [{'id': team.id, 'name': team.name} for team in self.teams],
        }

    def __repr__(self):
        return f'<Scorer {self.id} {self.name!r}>'


def system_default_scorer():
    return Scorer.query.filter_by(
        name=current_app.config['DEFAULT_SCORER_NAME'],
        communal=True
    ).order_by(Scorer.id).first()


def ensure_system_default_scorer():
    """
    Returns the system default scorer, creating it (and its owner) if missing.
    Only flushes; the caller owns the transaction.
    """
    scorer = system_default_scorer()
    if scorer:
        return scorer

    email = current_app.config['SYSTEM_USER_EMAIL']
    owner = User.query.filter_by(email=email).first()
    if owner is None:
        owner = User(email=email, name='System')
        db.session.add(owner)

    scorer = Scorer(
        name=current_app.config['DEFAULT_SCORER_NAME'],
        code=DEFAULT_SCORER_CODE,
        scale=[0, 1],
        communal=True,
        owner=owner,
    )
    db.session.add(scorer)
    db.session.flush()
    logger.info('Created system default scorer %s (id=%s)', scorer.name, scorer.id)
    return scorer
