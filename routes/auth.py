# routes/auth.py
# Session login for the JSON API

from functools import wraps

from flask import Blueprint, jsonify, request, session

from extensions import db
from models import User

auth_bp = Blueprint('auth', __name__)


def current_user():
    user_id = session.get('user_id')
    if user_id is None:
        return None
    return db.session.get(User, user_id)


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_user() is None:
            session.clear()
            return jsonify({'error': 'Unauthorized'}), 401
        return f(*args, **kwargs)
    return decorated_function


@auth_bp.route('/login', methods=['POST'])
def login():
    payload = request.get_json(silent=True) or {}
    email = (payload.get('email') or '').strip().lower()
    if not email:
        return jsonify({'error': 'Email is required'}), 400

    user = User.query.filter_by(email=email).first()
    if not user:
        return jsonify({'error': 'Unknown user'}), 401

    # Drop any previous session before storing the new user
    session.clear()
    session['user_id'] = user.id
    return jsonify({'id': user.id, 'email': user.email})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.clear()
    return '', 204
