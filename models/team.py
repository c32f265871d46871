# models/team.py

from extensions import db

# Scorers shared with a team
teams_scorers = db.Table('teams_scorers',
    db.Column('team_id', db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), primary_key=True),
    db.Column('scorer_id', db.Integer, db.ForeignKey('scorers.id', ondelete='CASCADE'), primary_key=True)
)

teams_members = db.Table('teams_members',
    db.Column('team_id', db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), primary_key=True),
    db.Column('member_id', db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
)


class Team(db.Model):
    __tablename__ = 'teams'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)

    scorers = db.relationship(
        'Scorer',
        secondary=teams_scorers,
        backref=db.backref('teams', lazy=True),
        lazy='select'
    )
    members = db.relationship(
        'User',
        secondary=teams_members,
        backref=db.backref('teams', lazy=True),
        lazy='select'
    )
