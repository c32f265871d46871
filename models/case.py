# models/case.py

from datetime import datetime

from extensions import db


class Case(db.Model):
    __tablename__ = 'cases'
    id = db.Column(db.Integer, primary_key=True)
    case_name = db.Column(db.String(191), nullable=False)
    owner_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    # A case always has a scorer; deleting one repoints cases to the system default
    scorer_id = db.Column(db.Integer, db.ForeignKey('scorers.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    owner = db.relationship('User')
    scorer = db.relationship('Scorer')
    queries = db.relationship('Query', backref='case', lazy=True, cascade="all, delete-orphan")
