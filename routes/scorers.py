# routes/scorers.py
# JSON API for scorers: list, show, create, update, delete

from flask import Blueprint, jsonify, request

import tracking
from errors import Forbidden, NotFound
from finder import ScorerFinder
from logic import DeletionGuard, MutationGateway, can_update
from models import Scorer
from routes.auth import current_user, login_required

scorers_bp = Blueprint('scorers', __name__, url_prefix='/api/v1/scorers')

TRUE_VALUES = ('1', 't', 'true', 'y', 'yes', 'on')


def parse_bool(value):
    if isinstance(value, bool):
        return value
    return str(value or '').strip().lower() in TRUE_VALUES


def scorer_params():
    """The `scorer` object of the request body, limited to the writable keys."""
    payload = request.get_json(silent=True) or {}
    raw = payload.get('scorer')
    if not isinstance(raw, dict):
        return {}
    return {key: raw[key] for key in Scorer.ATTRIBUTES if key in raw}


def error_response(outcome):
    return jsonify(outcome.to_dict()), outcome.status_code


@scorers_bp.route('', methods=['GET'])
@login_required
def index():
    finder = ScorerFinder(current_user())
    return jsonify({
        'user_scorers': [s.to_dict() for s in finder.user_scorers().all()],
        'communal_scorers': [s.to_dict() for s in finder.communal_scorers().all()],
    })


@scorers_bp.route('/<int:scorer_id>', methods=['GET'])
@login_required
def show(scorer_id):
    scorer = ScorerFinder(current_user()).find(scorer_id)
    if scorer is None:
        return error_response(NotFound())
    return jsonify(scorer.to_dict())


@scorers_bp.route('', methods=['POST'])
@login_required
def create():
    user = current_user()
    result = MutationGateway().create(user.id, scorer_params())
    if not result.ok:
        return jsonify(result.errors), 400

    tracking.track_scorer_created_event(user, result.scorer)
    return jsonify(result.scorer.to_dict()), 201


@scorers_bp.route('/<int:scorer_id>', methods=['PUT', 'PATCH'])
@login_required
def update(scorer_id):
    user = current_user()
    scorer = ScorerFinder(user).find(scorer_id)
    if scorer is None:
        return error_response(NotFound())

    if not can_update(scorer, user):
        return error_response(Forbidden('Cannot edit a scorer you do not own'))

    result = MutationGateway().update(scorer, scorer_params())
    if not result.ok:
        return jsonify(result.errors), 400

    tracking.track_scorer_updated_event(user, result.scorer)
    return jsonify(result.scorer.to_dict())


@scorers_bp.route('/<int:scorer_id>', methods=['DELETE'])
@login_required
def destroy(scorer_id):
    user = current_user()
    scorer = ScorerFinder(user).find(scorer_id)
    if scorer is None:
        return error_response(NotFound())

    force = parse_bool(request.args.get('force'))
    outcome = DeletionGuard().delete(scorer, user, force=force)
    if outcome is not None:
        return error_response(outcome)

    tracking.track_scorer_deleted_event(user, scorer)
    return '', 204
