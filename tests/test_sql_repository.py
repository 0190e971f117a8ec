"""
Tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from pokehunter.domain import NewArticle, NewUser, NewUserCollection, ProductFilters
from pokehunter.repositories.seed_data import load_seed


def _article(title: str, language: str = "en") -> NewArticle:
    return NewArticle(
        title=title,
        content="Body",
        excerpt="Short",
        author="PokeHunter Team",
        category="News",
        language=language,
    )


def test_articles_newest_first(sql_repo):
    first = sql_repo.create_article(_article("First"))
    second = sql_repo.create_article(_article("Second"))
    third = sql_repo.create_article(_article("Terzo", "it"))

    assert [a.id for a in sql_repo.get_articles()] == [third.id, second.id, first.id]
    assert [a.id for a in sql_repo.get_articles("en")] == [second.id, first.id]


def test_seed_loads_into_database(sql_repo):
    load_seed(sql_repo)
    assert len(sql_repo.get_product_types()) == 3
    assert len(sql_repo.get_collections()) == 2
    assert len(sql_repo.get_products()) == 13
    assert len(sql_repo.get_articles()) == 2


def test_search_includes_italian_description(sql_repo):
    load_seed(sql_repo)
    # "Elettro" appears only in Pikachu's description_it
    matched = sql_repo.get_products(ProductFilters(search="elettro"))
    assert sorted((p.name, p.language) for p in matched) == [("Pikachu V", "en"), ("Pikachu V", "it")]


def test_search_combines_with_equality_filters(sql_repo):
    load_seed(sql_repo)
    matched = sql_repo.get_products(ProductFilters(search="pika", language="it"))
    assert [(p.name, p.language) for p in matched] == [("Pikachu V", "it")]


def test_remove_deletes_every_matching_row(sql_repo):
    sql_repo.add_to_user_collection(NewUserCollection(user_id=1, product_id=5))
    sql_repo.add_to_user_collection(NewUserCollection(user_id=1, product_id=5))

    assert sql_repo.remove_from_user_collection(1, 5) is True
    assert sql_repo.get_user_collection(1) == []
    assert sql_repo.remove_from_user_collection(1, 5) is False


def test_usernames_are_unique(sql_repo):
    sql_repo.create_user(NewUser(username="misty", password="staryu"))
    with pytest.raises(IntegrityError):
        sql_repo.create_user(NewUser(username="misty", password="psyduck"))


def test_clear_all(sql_repo):
    load_seed(sql_repo)
    sql_repo.add_to_user_collection(NewUserCollection(user_id=1, product_id=1))
    sql_repo.clear_all()
    assert sql_repo.get_products() == []
    assert sql_repo.get_articles() == []
    assert sql_repo.get_user_collection(1) == []


def test_missing_database_url(monkeypatch):
    from pokehunter.core import config as core_config
    from pokehunter.db import session as db_session

    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    try:
        with pytest.raises(RuntimeError):
            db_session.get_engine()
    finally:
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
