# logic.py
# Scorer mutation rules: who may change a scorer, how a write recovers from
# a scale the database cannot store, and when a scorer may be deleted.

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from sqlalchemy.exc import IntegrityError, StatementError

from errors import INVALID_TYPE, DeletionBlocked, FieldErrors, Forbidden, ScaleTypeMismatch
from extensions import db
from models import Scorer, ensure_system_default_scorer, system_default_scorer
from references import ReferenceRegistry

logger = logging.getLogger(__name__)


# --- Authorization ---

def can_mutate(scorer, user):
    return user is not None and scorer.owner_id == user.id


def can_edit_communal(scorer, user):
    return bool(scorer.communal) and user is not None and user.can_edit_communal_scorers


def can_update(scorer, user):
    return can_mutate(scorer, user) or can_edit_communal(scorer, user)


def can_delete(scorer, user):
    # Communal-edit rights never extend to deletion
    return can_mutate(scorer, user)


# --- Create / update ---

@dataclass
class MutationResult:
    scorer: Scorer
    errors: FieldErrors = field(default_factory=dict)
    # True when the scale was dropped and the write retried without it
    fallback: bool = False

    @property
    def ok(self):
        return not self.errors


def without_scale(attrs):
    return {key: value for key, value in attrs.items() if key != 'scale'}


class MutationGateway:
    """
    Writes scorers. If the scale cannot be serialised, the write is retried
    once without it so the rest of the submitted fields are kept, and the
    result carries `scale: invalid-type`.

    The scale shape is checked when attrs are applied, before validation, so
    `scale: invalid-type` is reported alongside any other field errors.
    """

    def create(self, owner_id, attrs) -> MutationResult:
        try:
            scorer = Scorer(owner_id=owner_id).apply(attrs)
            errors = self._save(scorer)
        except ScaleTypeMismatch as exc:
            logger.warning('Scale rejected creating scorer for user %s (%s), retrying without it', owner_id, exc)
            db.session.rollback()
            # Start over from a new record
            scorer = Scorer(owner_id=owner_id).apply(without_scale(attrs))
            return self._retry(scorer)

        return MutationResult(scorer, errors)

    def update(self, scorer, attrs) -> MutationResult:
        try:
            scorer.apply(attrs)
            errors = self._save(scorer)
        except ScaleTypeMismatch as exc:
            logger.warning('Scale rejected updating scorer %s (%s), retrying without it', scorer.id, exc)
            # Drop whatever the first attempt left in memory
            db.session.rollback()
            db.session.refresh(scorer)
            scorer.apply(without_scale(attrs))
            return self._retry(scorer)

        return MutationResult(scorer, errors)

    def _retry(self, scorer):
        try:
            errors = self._save(scorer)
        except ScaleTypeMismatch:
            # Only ever retried once
            errors = {}

        scale_errors = errors.setdefault('scale', [])
        if INVALID_TYPE not in scale_errors:
            scale_errors.append(INVALID_TYPE)

        return MutationResult(scorer, errors, fallback=True)

    def _save(self, scorer) -> FieldErrors:
        # Reading expired attributes must not flush the pending changes
        with db.session.no_autoflush:
            errors = scorer.validate()
        if errors:
            db.session.rollback()
            return errors

        db.session.add(scorer)
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            logger.warning('Integrity error saving scorer: %s', exc.orig)
            return {'base': ['integrity']}
        except StatementError as exc:
            db.session.rollback()
            # Errors from bind processing arrive wrapped
            if isinstance(exc.orig, ScaleTypeMismatch):
                raise exc.orig from exc
            logger.warning('Could not store scorer: %s', exc.orig)
            return {'base': [INVALID_TYPE]}
        except ScaleTypeMismatch:
            db.session.rollback()
            raise

        return {}


# --- Delete ---

Outcome = Optional[Union[Forbidden, DeletionBlocked]]


class DeletionGuard:
    """
    Deletes a scorer only once nothing references it.

    References are checked in a fixed order: users, cases, queries, teams.
    Without `force` the first kind found blocks the delete. With `force`,
    user and case references are repointed to the system default scorer and
    query references are cleared; team shares always block. Repairs and the
    delete are committed together, so a blocked call changes nothing.
    """

    # kind -> repoint to the system default (True) or clear (False)
    REPAIRABLE = (
        ('users', True),
        ('cases', True),
        ('queries', False),
    )

    def __init__(self, registry=None):
        self.registry = registry or ReferenceRegistry()

    def delete(self, scorer, requested_by, force=False) -> Outcome:
        if not can_delete(scorer, requested_by):
            return Forbidden('Cannot delete a scorer you do not own')

        scorer_id = scorer.id
        if db.session.get(Scorer, scorer_id) is None:
            logger.info('Scorer %s is already gone, nothing to delete', scorer_id)
            return None

        default = system_default_scorer()
        if default is not None and default.id == scorer_id:
            return DeletionBlocked('system', 0)

        for kind, to_default in self.REPAIRABLE:
            refs = self.registry.lookup(kind, scorer_id)
            if not refs.count:
                continue

            if not force:
                return self._blocked(refs)

            target = ensure_system_default_scorer().id if to_default else None
            changed = self.registry.reassign(kind, scorer_id, target)
            logger.info('Repointed %d %s from scorer %s to %s', changed, kind, scorer_id, target)

        teams = self.registry.lookup('teams', scorer_id)
        if teams.count:
            return self._blocked(teams)

        Scorer.query.filter_by(id=scorer_id).delete(synchronize_session=False)
        if scorer in db.session:
            db.session.expunge(scorer)
        db.session.commit()

        logger.info('Deleted scorer %s', scorer_id)
        return None

    def _blocked(self, refs):
        # Undo any repairs made earlier in this call
        db.session.rollback()
        logger.info('Delete blocked by %d %s: %s', refs.count, refs.kind, ', '.join(refs.sample))
        return DeletionBlocked(refs.kind, refs.count, refs.sample)
