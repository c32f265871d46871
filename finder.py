# finder.py
# Resolves a scorer id for the current user: own scorers first, then communal.

from sqlalchemy import or_, select

from models import Scorer, teams_members, teams_scorers


class ScorerFinder:
    def __init__(self, user):
        self.user = user

    def user_scorers(self):
        """Scorers the user owns or that are shared with one of their teams."""
        shared = select(teams_scorers.c.scorer_id).select_from(
            teams_scorers.join(teams_members, teams_members.c.team_id == teams_scorers.c.team_id)
        ).where(teams_members.c.member_id == self.user.id)

        return Scorer.query.filter(
            or_(Scorer.owner_id == self.user.id, Scorer.id.in_(shared))
        ).order_by(Scorer.id)

    @staticmethod
    def communal_scorers():
        return Scorer.query.filter_by(communal=True).order_by(Scorer.id)

    def find(self, scorer_id):
        scorer = self.user_scorers().filter(Scorer.id == scorer_id).first()
        if scorer is None:
            scorer = self.communal_scorers().filter(Scorer.id == scorer_id).first()
        return scorer
