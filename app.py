# app.py
# Flask application factory

import logging
import os

from flask import Flask, jsonify

from config import Config
from extensions import db, migrate

# Models must be imported so Flask-Migrate sees every table
from models import User, Scorer, Case, Query, Team, ensure_system_default_scorer


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    os.makedirs(app.instance_path, exist_ok=True)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    # --- Extensions ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- Blueprints ---
    from routes.auth import auth_bp
    from routes.scorers import scorers_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(scorers_bp)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not Found!'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method Not Allowed'}), 405

    if app.config.get('AUTO_CREATE_SCHEMA'):
        with app.app_context():
            db.create_all()
            ensure_system_default_scorer()
            db.session.commit()

    return app
