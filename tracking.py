# tracking.py
# Analytics events for scorer lifecycle. Fire-and-forget: a failing event is
# logged and never reaches the request.

import logging

logger = logging.getLogger('analytics')

SCORER_CREATED = 'Scorer Created'
SCORER_UPDATED = 'Scorer Updated'
SCORER_DELETED = 'Scorer Deleted'


def _track(event, user, scorer):
    try:
        logger.info('%s: user=%s scorer=%s name=%r', event, user.id, scorer.id, scorer.name)
    except Exception:
        logger.exception('Failed to track %s', event)


def track_scorer_created_event(user, scorer):
    _track(SCORER_CREATED, user, scorer)


def track_scorer_updated_event(user, scorer):
    _track(SCORER_UPDATED, user, scorer)


def track_scorer_deleted_event(user, scorer):
    _track(SCORER_DELETED, user, scorer)
