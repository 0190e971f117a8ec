from __future__ import annotations

import threading

from pokehunter.domain import NewArticle, NewProduct, NewUserCollection, ProductFilters
from pokehunter.repositories.memory_storage import MemoryStorage


def _ids(products):
    return [p.id for p in products]


def test_seed_fixture_is_loaded(seeded_memory):
    assert [t.name for t in seeded_memory.get_product_types()] == [
        "Single Cards",
        "Booster Packs",
        "Elite Trainer Box",
    ]
    assert [c.name for c in seeded_memory.get_collections()] == ["Paldea Evolved", "Scarlet & Violet"]
    assert len(seeded_memory.get_products()) == 13
    assert len(seeded_memory.get_articles()) == 2
    assert seeded_memory.get_user_collection(1) == []


def test_seed_products_reference_seed_ids(seeded_memory):
    charizard = seeded_memory.get_product(1)
    assert charizard.name == "Charizard VMAX"
    assert charizard.language == "en"
    assert charizard.collection_id == 1
    assert charizard.product_type_id == 1
    assert charizard.prices == {"cardmarket": 89.99, "ebay": 95.00, "tcgplayer": 92.50}

    charizard_it = seeded_memory.get_product(6)
    assert charizard_it.language == "it"
    assert charizard_it.prices["cardmarket"] == 75.99

    etb = seeded_memory.get_product(13)
    assert etb.product_type_id == 3
    assert etb.card_number is None
    assert etb.rarity is None


def test_empty_store_has_no_seed(empty_memory):
    assert empty_memory.get_products() == []
    assert empty_memory.get_collections() == []
    assert empty_memory.get_articles() == []


def test_filters_on_seed(seeded_memory):
    assert _ids(seeded_memory.get_products(ProductFilters(collection_id=1))) == [1, 4, 6, 9, 11, 13]
    assert _ids(seeded_memory.get_products(ProductFilters(collection_id=1, language="it"))) == [6, 9]
    assert _ids(seeded_memory.get_products(ProductFilters(product_type_id=2))) == [11, 12]
    assert _ids(seeded_memory.get_products(ProductFilters(search="pika"))) == [2, 7]
    assert _ids(seeded_memory.get_products(ProductFilters(search="busta"))) == [11, 12]
    assert seeded_memory.get_products(ProductFilters(language="EN")) == []


def test_zero_and_blank_filters_are_ignored(seeded_memory):
    everything = seeded_memory.get_products()
    assert seeded_memory.get_products(ProductFilters(collection_id=0, product_type_id=0)) == everything
    assert seeded_memory.get_products(ProductFilters(language="", search="")) == everything


def test_search_skips_italian_description(seeded_memory):
    # "Elettro" appears only in Pikachu's description_it
    assert seeded_memory.get_products(ProductFilters(search="elettro")) == []


def test_articles_keep_insertion_order(seeded_memory):
    created = seeded_memory.create_article(
        NewArticle(
            title="Nuove uscite",
            content="Contenuto",
            excerpt="Estratto",
            author="PokeHunter Team",
            category="News",
            language="it",
        )
    )
    assert created.id == 3
    assert _ids(seeded_memory.get_articles()) == [1, 2, 3]
    assert _ids(seeded_memory.get_articles("it")) == [3]


def test_counters_are_not_derived_from_size(empty_memory):
    first = empty_memory.add_to_user_collection(NewUserCollection(user_id=1, product_id=1))
    assert empty_memory.remove_from_user_collection(1, 1)
    second = empty_memory.add_to_user_collection(NewUserCollection(user_id=1, product_id=1))
    assert (first.id, second.id) == (1, 2)


def test_remove_takes_first_match_only(empty_memory):
    first = empty_memory.add_to_user_collection(NewUserCollection(user_id=1, product_id=5))
    second = empty_memory.add_to_user_collection(NewUserCollection(user_id=1, product_id=5))

    assert empty_memory.remove_from_user_collection(1, 5) is True
    assert [item.id for item in empty_memory.get_user_collection(1)] == [second.id]
    assert first.id != second.id


def test_foreign_keys_are_not_checked(empty_memory):
    product = empty_memory.create_product(
        NewProduct(name="Orphan", name_it="Orfano", collection_id=99, product_type_id=42)
    )
    assert empty_memory.get_product(product.id).collection_id == 99
    entry = empty_memory.add_to_user_collection(NewUserCollection(user_id=500, product_id=600))
    assert entry.product_id == 600


def test_returned_records_are_copies(seeded_memory):
    product = seeded_memory.get_product(1)
    product.name = "Changed"
    product.prices["cardmarket"] = 0.0
    stored = seeded_memory.get_product(1)
    assert stored.name == "Charizard VMAX"
    assert stored.prices["cardmarket"] == 89.99


def test_concurrent_creates_get_unique_ids():
    storage = MemoryStorage(seed=False)
    results = []

    def worker():
        for _ in range(50):
            results.append(storage.add_to_user_collection(NewUserCollection(user_id=1, product_id=1)).id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(1, 201))
    assert len(storage.get_user_collection(1)) == 200
