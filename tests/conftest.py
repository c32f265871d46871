"""Shared fixtures: an app on in-memory SQLite and small model factories."""

import pytest

from app import create_app
from config import TestConfig
from extensions import db
from models import Case, Query, Scorer, Team, User, system_default_scorer


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def default_scorer(app) -> Scorer:
    scorer = system_default_scorer()
    assert scorer is not None
    return scorer


@pytest.fixture
def make_user(app):
    def _make(email, **kwargs) -> User:
        user = User(email=email, **kwargs)
        db.session.add(user)
        db.session.commit()
        return user
    return _make


@pytest.fixture
def make_scorer(app):
    def _make(owner, name='Scorer', **kwargs) -> Scorer:
        kwargs.setdefault('scale', [1, 2, 3])
        scorer = Scorer(owner_id=owner.id, name=name, **kwargs)
        db.session.add(scorer)
        db.session.commit()
        return scorer
    return _make


@pytest.fixture
def make_case(app):
    def _make(case_name, scorer, owner=None) -> Case:
        case = Case(case_name=case_name, scorer_id=scorer.id, owner_id=owner.id if owner else None)
        db.session.add(case)
        db.session.commit()
        return case
    return _make


@pytest.fixture
def make_query(app):
    def _make(query_text, case, scorer=None) -> Query:
        query = Query(query_text=query_text, case_id=case.id, scorer_id=scorer.id if scorer else None)
        db.session.add(query)
        db.session.commit()
        return query
    return _make


@pytest.fixture
def make_team(app):
    def _make(name, scorers=(), members=()) -> Team:
        team = Team(name=name, scorers=list(scorers), members=list(members))
        db.session.add(team)
        db.session.commit()
        return team
    return _make


@pytest.fixture
def login(client):
    def _login(user):
        user_id = user.id
        with client.session_transaction() as sess:
            sess['user_id'] = user_id
    return _login


def reload_row(model, pk):
    """Fresh copy of a row, bypassing anything cached in the session."""
    db.session.expire_all()
    return db.session.get(model, pk)
