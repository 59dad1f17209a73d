"""
Repository tests against a real SQLite database: unique conflicts, ordering,
owner-scoped deletes and the cascade from users.
"""

from datetime import date, timedelta
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from app.exceptions import ConflictError
from domain.models import Comment, CustomPlanItem, Post, User, WeightRecord
from repositories import (
    CommentRepository,
    CustomPlanRepository,
    FoodRepository,
    PostRepository,
    UserRepository,
    WeightRepository,
)
from repositories.base import violated_unique_column
from repositories.user_repository import EMAIL_TAKEN_MESSAGE, NICKNAME_TAKEN_MESSAGE
from test_fixtures import make_food, make_plan_item, make_post, make_user


def _new_user_fields(**overrides):
    fields = dict(
        email="nuevo@example.com",
        nickname="nuevo",
        password_hash="x",
        first_name="Nuevo",
        last_name="Usuario",
    )
    fields.update(overrides)
    return fields


class TestViolatedUniqueColumn:
    def test_uses_postgres_constraint_name(self):
        orig = SimpleNamespace(diag=SimpleNamespace(constraint_name="users_nickname_key"))
        error = IntegrityError("INSERT ...", {}, orig)
        assert violated_unique_column(error, ["email", "nickname"]) == "nickname"

    def test_unknown_constraint_name(self):
        orig = SimpleNamespace(diag=SimpleNamespace(constraint_name="users_pkey"))
        error = IntegrityError("INSERT ...", {}, orig)
        assert violated_unique_column(error, ["email", "nickname"]) is None

    def test_falls_back_to_message(self):
        error = IntegrityError(
            "INSERT ...", {}, Exception("UNIQUE constraint failed: users.email")
        )
        assert violated_unique_column(error, ["email", "nickname"]) == "email"

    def test_postgres_message_without_diag(self):
        error = IntegrityError(
            "INSERT ...",
            {},
            Exception('duplicate key value violates unique constraint "users_nickname_key"'),
        )
        assert violated_unique_column(error, ["email", "nickname"]) == "nickname"


class TestUserRepository:
    def test_duplicate_email_is_a_conflict(self, db_session):
        existing = make_user(db_session)
        repo = UserRepository(db_session)

        with pytest.raises(ConflictError) as exc_info:
            repo.create_user(**_new_user_fields(email=existing.email))

        assert exc_info.value.field == "email"
        assert exc_info.value.message == EMAIL_TAKEN_MESSAGE

    def test_duplicate_nickname_is_a_conflict(self, db_session):
        existing = make_user(db_session)
        repo = UserRepository(db_session)

        with pytest.raises(ConflictError) as exc_info:
            repo.create_user(**_new_user_fields(nickname=existing.nickname))

        assert exc_info.value.field == "nickname"
        assert exc_info.value.message == NICKNAME_TAKEN_MESSAGE

    def test_session_usable_after_conflict(self, db_session):
        existing = make_user(db_session)
        repo = UserRepository(db_session)
        with pytest.raises(ConflictError):
            repo.create_user(**_new_user_fields(email=existing.email))

        created = repo.create_user(**_new_user_fields())
        assert created.user_id is not None

    def test_login_identifier_matches_email_or_nickname(self, db_session):
        user = make_user(db_session)
        repo = UserRepository(db_session)

        assert repo.get_by_login_identifier(user.email).user_id == user.user_id
        assert repo.get_by_login_identifier(user.nickname).user_id == user.user_id
        assert repo.get_by_login_identifier("nobody") is None

    def test_update_fields_skips_none(self, db_session):
        user = make_user(db_session, weight=80)
        repo = UserRepository(db_session)

        repo.update_fields(user, weight=None, first_name="Sofía")

        assert user.weight == 80
        assert user.first_name == "Sofía"

    def test_update_to_taken_nickname_is_a_conflict(self, db_session):
        first = make_user(db_session)
        second = make_user(db_session)

        with pytest.raises(ConflictError) as exc_info:
            UserRepository(db_session).update_fields(second, nickname=first.nickname)

        assert exc_info.value.field == "nickname"

    def test_deleting_user_removes_dependents(self, db_session):
        user = make_user(db_session)
        WeightRepository(db_session).add(user.user_id, 70)
        make_plan_item(db_session, user, custom_food_name="Sandwich")
        make_post(db_session, user)

        db_session.delete(db_session.get(User, user.user_id))
        db_session.commit()

        assert db_session.query(WeightRecord).count() == 0
        assert db_session.query(CustomPlanItem).count() == 0
        assert db_session.query(Post).count() == 0


class TestWeightRepository:
    def test_latest_first_and_limited(self, db_session):
        user = make_user(db_session)
        today = date.today()
        for days_ago in range(35):
            db_session.add(
                WeightRecord(
                    user_id=user.user_id,
                    weight=70 + days_ago / 10,
                    recorded_at=today - timedelta(days=days_ago),
                )
            )
        db_session.commit()

        records = WeightRepository(db_session).latest_for_user(user.user_id)

        assert len(records) == 30
        assert records[0].recorded_at == today
        assert records[-1].recorded_at == today - timedelta(days=29)

    def test_only_own_records(self, db_session):
        mine = make_user(db_session)
        other = make_user(db_session)
        WeightRepository(db_session).add(other.user_id, 90)

        assert WeightRepository(db_session).latest_for_user(mine.user_id) == []


class TestFoodRepository:
    def test_search_matches_name_or_category(self, db_session):
        make_food(db_session, name="Manzana verde", category="Fruta")
        make_food(db_session, name="Pera", category="Fruta")
        make_food(db_session, name="Arroz", category="Cereal")
        repo = FoodRepository(db_session)

        assert {f.name for f in repo.search("fruta")} == {"Manzana verde", "Pera"}
        assert [f.name for f in repo.search("MANZ")] == ["Manzana verde"]

    def test_search_is_capped(self, db_session):
        for i in range(25):
            make_food(db_session, name=f"Galleta {i}")
        assert len(FoodRepository(db_session).search("galleta")) == 20

    def test_viability_skips_unrated(self, db_session):
        rated = make_food(db_session, name="Avena", viability_weight_loss="very good")
        make_food(db_session, name="Avena instantanea", viability_weight_loss=None)

        rows = FoodRepository(db_session).viability_for("viability_weight_loss", "avena")

        assert [(r[0], r[1], r[2]) for r in rows] == [(rated.food_id, "Avena", "very good")]


class TestOwnedDeletes:
    def test_plan_item_of_another_user_is_kept(self, db_session):
        owner = make_user(db_session)
        intruder = make_user(db_session)
        item = make_plan_item(db_session, owner, custom_food_name="Ensalada")

        count = CustomPlanRepository(db_session).delete_owned(item.item_id, intruder.user_id)

        assert count == 0
        assert db_session.query(CustomPlanItem).count() == 1

    def test_plan_item_of_owner_is_deleted(self, db_session):
        owner = make_user(db_session)
        item = make_plan_item(db_session, owner, custom_food_name="Ensalada")

        assert CustomPlanRepository(db_session).delete_owned(item.item_id, owner.user_id) == 1
        assert db_session.query(CustomPlanItem).count() == 0

    def test_post_delete_takes_comments_with_it(self, db_session):
        owner = make_user(db_session)
        reader = make_user(db_session)
        post = make_post(db_session, owner)
        CommentRepository(db_session).create(
            Comment(post_id=post.post_id, user_id=reader.user_id, text="Rico!")
        )

        assert PostRepository(db_session).delete_owned(post.post_id, owner.user_id) == 1
        assert db_session.query(Post).count() == 0
        assert db_session.query(Comment).count() == 0

    def test_post_of_another_user_keeps_its_comments(self, db_session):
        owner = make_user(db_session)
        intruder = make_user(db_session)
        post = make_post(db_session, owner)
        CommentRepository(db_session).create(
            Comment(post_id=post.post_id, user_id=owner.user_id, text="Primer comentario")
        )

        assert PostRepository(db_session).delete_owned(post.post_id, intruder.user_id) == 0
        assert db_session.query(Post).count() == 1
        assert db_session.query(Comment).count() == 1

    def test_feed_filters_by_category_newest_first(self, db_session):
        user = make_user(db_session)
        first = make_post(db_session, user, category="tips")
        make_post(db_session, user, category="recipes")
        second = make_post(db_session, user, category="tips")

        feed = PostRepository(db_session).list_feed("tips")

        assert [p.post_id for p in feed] == [second.post_id, first.post_id]
