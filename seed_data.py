# seed_data.py
# Fills the database with demo users, scorers, cases, queries and a team

from app import create_app
from extensions import db
from models import User, Scorer, Case, Query, Team, teams_members, teams_scorers, ensure_system_default_scorer

app = create_app()

with app.app_context():
    # --- 1. Clear old data ---
    print("Clearing old data...")
    # Reverse dependency order
    db.session.query(Query).delete()
    db.session.query(Case).delete()
    db.session.execute(teams_scorers.delete())
    db.session.execute(teams_members.delete())
    db.session.query(Team).delete()
    db.session.query(User).update({User.default_scorer_id: None})
    db.session.query(Scorer).delete()
    db.session.query(User).delete()
    db.session.commit()
    print("Done.")

    # --- 2. Create data ---
    print("Adding demo data...")

    try:
        default_scorer = ensure_system_default_scorer()

        admin = User(email='admin@example.com', name='Admin', administrator=True)
        alice = User(email='alice@example.com', name='Alice')
        bob = User(email='bob@example.com', name='Bob')
        db.session.add_all([admin, alice, bob])
        db.session.commit()

        ndcg = Scorer(
            name='nDCG@10', owner_id=alice.id, code='setScore(ndcg(10));',
            scale=[0, 1, 2, 3], show_scale_labels=True,
            scale_with_labels={'0': 'Poor', '1': 'Fair', '2': 'Good', '3': 'Perfect'}
        )
        precision = Scorer(name='P@5', owner_id=alice.id, code='setScore(precision(5));', scale=[0, 1])
        shared = Scorer(name='Team graded', owner_id=bob.id, code='setScore(avgQuery(10));', scale=[1, 2, 3, 4])
        db.session.add_all([ndcg, precision, shared])
        db.session.commit()

        # Bob uses Alice's scorer by default, so deleting it needs force
        bob.default_scorer_id = ndcg.id
        alice.default_scorer_id = default_scorer.id

        case = Case(case_name='Movie search', owner_id=alice.id, scorer_id=ndcg.id)
        db.session.add(case)
        db.session.commit()

        db.session.add_all([
            Query(query_text='star wars', case_id=case.id, scorer_id=precision.id),
            Query(query_text='the matrix', case_id=case.id),
        ])

        team = Team(name='Relevance', members=[alice, bob], scorers=[shared])
        db.session.add(team)
        db.session.commit()

        print("Demo data added.")
    except Exception as e:
        db.session.rollback()
        print(f"Seeding failed: {e}")
        raise
