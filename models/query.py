# models/query.py

from extensions import db


class Query(db.Model):
    __tablename__ = 'queries'
    id = db.Column(db.Integer, primary_key=True)
    query_text = db.Column(db.String(500), nullable=False)
    case_id = db.Column(db.Integer, db.ForeignKey('cases.id', ondelete='CASCADE'), nullable=False)
    # Optional per-query override of the case scorer
    scorer_id = db.Column(db.Integer, db.ForeignKey('scorers.id'), nullable=True, index=True)

    scorer = db.relationship('Scorer')
