# models/user.py

from datetime import datetime

from extensions import db


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=True)
    administrator = db.Column(db.Boolean, nullable=False, default=False)

    # users <-> scorers is a cycle (scorers.owner_id), hence use_alter / post_update
    default_scorer_id = db.Column(
        db.Integer,
        db.ForeignKey('scorers.id', use_alter=True, name='fk_users_default_scorer_id'),
        nullable=True,
        index=True
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    default_scorer = db.relationship('Scorer', foreign_keys=[default_scorer_id], post_update=True)

    @property
    def can_edit_communal_scorers(self):
        # The only capability granting edits on communal scorers someone else owns
        return bool(self.administrator)

    def __repr__(self):
        return f'<User {self.email}>'
