# references.py
# Everything that points at a scorer by id: user defaults, case and query
# scorers, and team shares.

from dataclasses import dataclass
from typing import Tuple

from models import Case, Query, Team, User, teams_scorers

# How many labels a blocked-delete message carries
SAMPLE_SIZE = 3


@dataclass(frozen=True)
class References:
    kind: str
    count: int
    sample: Tuple[str, ...] = ()


class ReferenceRegistry:
    """
    Read-only lookups of the rows referencing a scorer, plus the bulk
    repoint used by a forced delete.
    """

    # kind -> (model, referencing column, label column)
    COLUMNS = {
        'users': (User, 'default_scorer_id', 'email'),
        'cases': (Case, 'scorer_id', 'case_name'),
        'queries': (Query, 'scorer_id', 'query_text'),
    }

    KINDS = ('users', 'cases', 'queries', 'teams')

    def _scoped(self, kind, scorer_id):
        if kind == 'teams':
            return Team, Team.query.join(
                teams_scorers, teams_scorers.c.team_id == Team.id
            ).filter(teams_scorers.c.scorer_id == scorer_id)

        model, column, _ = self.COLUMNS[kind]
        return model, model.query.filter(getattr(model, column) == scorer_id)

    def lookup(self, kind, scorer_id):
        model, query = self._scoped(kind, scorer_id)
        label = 'name' if kind == 'teams' else self.COLUMNS[kind][2]

        count = query.count()
        if not count:
            return References(kind, 0)

        rows = query.order_by(model.id).limit(SAMPLE_SIZE).all()
        return References(kind, count, tuple(getattr(row, label) for row in rows))

    def reassign(self, kind, old_scorer_id, new_scorer_id):
        """
        Repoints every `kind` reference from old_scorer_id to new_scorer_id
        (None clears it) in one UPDATE. Skips per-row validation and model
        events. Returns the number of rows changed; running it again matches
        nothing.
        """
        if kind not in self.COLUMNS:
            raise ValueError(f'{kind} references cannot be reassigned')

        model, column, _ = self.COLUMNS[kind]
        return model.query.filter(getattr(model, column) == old_scorer_id).update(
            {getattr(model, column): new_scorer_id},
            synchronize_session=False
        )
