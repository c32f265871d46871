"""Ownership and communal-edit predicates."""

from logic import can_delete, can_edit_communal, can_mutate, can_update


class TestOwnership:
    def test_owner_can_mutate_update_and_delete(self, make_user, make_scorer) -> None:
        owner = make_user('owner@example.com')
        scorer = make_scorer(owner)

        assert can_mutate(scorer, owner)
        assert can_update(scorer, owner)
        assert can_delete(scorer, owner)

    def test_stranger_cannot_touch_private_scorer(self, make_user, make_scorer) -> None:
        owner = make_user('owner@example.com')
        stranger = make_user('stranger@example.com', administrator=True)
        scorer = make_scorer(owner)

        assert not can_mutate(scorer, stranger)
        assert not can_edit_communal(scorer, stranger)
        assert not can_update(scorer, stranger)
        assert not can_delete(scorer, stranger)

    def test_no_user_is_never_allowed(self, make_user, make_scorer) -> None:
        scorer = make_scorer(make_user('owner@example.com'), communal=True)

        assert not can_update(scorer, None)
        assert not can_delete(scorer, None)


class TestCommunal:
    def test_editor_can_update_but_not_delete(self, make_user, make_scorer) -> None:
        owner = make_user('owner@example.com')
        editor = make_user('admin@example.com', administrator=True)
        scorer = make_scorer(owner, communal=True)

        assert can_edit_communal(scorer, editor)
        assert can_update(scorer, editor)
        assert not can_delete(scorer, editor)

    def test_plain_user_cannot_update_communal(self, make_user, make_scorer) -> None:
        owner = make_user('owner@example.com')
        user = make_user('user@example.com')
        scorer = make_scorer(owner, communal=True)

        assert not can_edit_communal(scorer, user)
        assert not can_update(scorer, user)
