# models/__init__.py

from .user import User
from .scorer import Scorer, system_default_scorer, ensure_system_default_scorer
from .case import Case
from .query import Query
from .team import Team, teams_scorers, teams_members
