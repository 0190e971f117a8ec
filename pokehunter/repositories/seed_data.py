"""
Fixed catalog fixture loaded into fresh stores.

Records are listed in insertion order; the ids they receive (1, 2, 3 ...) are
the ids referenced by ``collection_id`` / ``product_type_id`` below.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import TYPE_CHECKING

from pokehunter.domain import NewArticle, NewCollection, NewProduct, NewProductType

if TYPE_CHECKING:
    from pokehunter.repositories.base import Storage

SINGLE_CARDS = 1
BOOSTER_PACKS = 2
ELITE_TRAINER_BOX = 3

PALDEA_EVOLVED = 1
SCARLET_VIOLET = 2

_IMG_A = "https://images.unsplash.com/photo-1542273917363-3b1817f69a2d?w=300&h=400&fit=crop"
_IMG_B = "https://images.unsplash.com/photo-1606107557195-0e29a4b5b4aa?w=300&h=400&fit=crop"
_IMG_C = "https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=300&h=400&fit=crop"

PRODUCT_TYPES = (
    NewProductType(
        name="Single Cards",
        name_it="Carte Singole",
        description="Individual Pokemon cards",
        description_it="Carte Pokemon individuali",
    ),
    NewProductType(
        name="Booster Packs",
        name_it="Buste",
        description="Booster packs containing random cards",
        description_it="Buste contenenti carte casuali",
    ),
    NewProductType(
        name="Elite Trainer Box",
        name_it="Elite Trainer Box",
        description="Complete trainer boxes with packs and accessories",
        description_it="Scatole complete con buste e accessori",
    ),
)

COLLECTIONS = (
    NewCollection(
        name="Paldea Evolved",
        name_it="Paldea Evolved",
        description="The latest expansion featuring Paldea region Pokemon",
        description_it="L'ultima espansione con Pokemon della regione di Paldea",
        image_url="https://images.unsplash.com/photo-1606107557195-0e29a4b5b4aa?w=400&h=300&fit=crop",
        release_date=date(2024, 6, 9),
    ),
    NewCollection(
        name="Scarlet & Violet",
        name_it="Scarlatto e Violetto",
        description="Base set of the Scarlet & Violet series",
        description_it="Set base della serie Scarlatto e Violetto",
        image_url="https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=400&h=300&fit=crop",
        release_date=date(2023, 3, 31),
    ),
)

# (name, description, description_it, collection, card_number, rarity, image, en prices, it prices)
_CARDS = (
    ("Charizard VMAX", "Rare Charizard VMAX card", "Carta rara Charizard VMAX",
     PALDEA_EVOLVED, "020/189", "Rare", _IMG_A, (89.99, 95.00, 92.50), (75.99, 82.00, 78.50)),
    ("Pikachu V", "Electric-type Pokemon V card", "Carta Pokemon V di tipo Elettro",
     SCARLET_VIOLET, "025/198", "Ultra Rare", _IMG_B, (45.99, 52.00, 48.75), (38.99, 44.00, 41.25)),
    ("Mewtwo EX", "Psychic-type legendary Pokemon EX", "Pokemon EX leggendario di tipo Psico",
     SCARLET_VIOLET, "150/198", "EX", _IMG_C, (67.50, 72.00, 69.25), (58.50, 63.00, 60.25)),
    ("Garchomp V", "Dragon-type Pokemon V card", "Carta Pokemon V di tipo Drago",
     PALDEA_EVOLVED, "445/189", "Ultra Rare", _IMG_A, (32.99, 38.00, 35.50), (28.99, 33.00, 30.50)),
    ("Lucario VMAX", "Fighting-type Pokemon VMAX", "Pokemon VMAX di tipo Lotta",
     SCARLET_VIOLET, "448/198", "VMAX", _IMG_B, (78.99, 85.00, 81.25), (68.99, 74.00, 71.25)),
)


def _prices(values: tuple[float, float, float]) -> dict[str, float]:
    cardmarket, ebay, tcgplayer = values
    return {"cardmarket": cardmarket, "ebay": ebay, "tcgplayer": tcgplayer}


def _card(row: tuple, language: str) -> NewProduct:
    name, description, description_it, collection_id, number, rarity, image, en, it = row
    return NewProduct(
        name=name,
        name_it=name,
        description=description,
        description_it=description_it,
        collection_id=collection_id,
        product_type_id=SINGLE_CARDS,
        card_number=number,
        rarity=rarity,
        language=language,
        image_url=image,
        prices=_prices(en if language == "en" else it),
    )


PRODUCTS = (
    *(_card(row, "en") for row in _CARDS),
    *(_card(row, "it") for row in _CARDS),
    NewProduct(
        name="Paldea Evolved Booster Pack",
        name_it="Busta Paldea Evolved",
        description="11 card booster pack",
        description_it="Busta da 11 carte",
        collection_id=PALDEA_EVOLVED,
        product_type_id=BOOSTER_PACKS,
        language="en",
        image_url=_IMG_C,
        prices=_prices((3.99, 4.50, 4.25)),
    ),
    NewProduct(
        name="Scarlet & Violet Booster Pack",
        name_it="Busta Scarlatto e Violetto",
        description="11 card booster pack",
        description_it="Busta da 11 carte",
        collection_id=SCARLET_VIOLET,
        product_type_id=BOOSTER_PACKS,
        language="en",
        image_url=_IMG_C,
        prices=_prices((4.25, 4.75, 4.50)),
    ),
    NewProduct(
        name="Paldea Evolved Elite Trainer Box",
        name_it="Elite Trainer Box Paldea Evolved",
        description="Contains 9 booster packs and accessories",
        description_it="Contiene 9 buste e accessori",
        collection_id=PALDEA_EVOLVED,
        product_type_id=ELITE_TRAINER_BOX,
        language="en",
        image_url=_IMG_C,
        prices=_prices((39.99, 45.00, 42.50)),
    ),
)

ARTICLES = (
    NewArticle(
        title="Paldea Evolved: Complete Set Review & Investment Guide",
        content=(
            "Discover the most valuable cards from the latest expansion and learn "
            "which ones are worth adding to your collection."
        ),
        excerpt="Complete guide to Paldea Evolved set with investment tips",
        author="PokeHunter Team",
        category="Featured",
        language="en",
        image_url="https://images.unsplash.com/photo-1606107557195-0e29a4b5b4aa?w=800&h=400&fit=crop",
        featured=True,
    ),
    NewArticle(
        title="Pack Opening Strategy: Maximizing Your Pulls",
        content="Learn the best techniques and timing for opening booster packs to get the most value.",
        excerpt="Best practices for booster pack opening",
        author="PokeHunter Team",
        category="Strategy",
        language="en",
        image_url="https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=400&h=200&fit=crop",
        featured=False,
    ),
)


def load_seed(storage: Storage) -> None:
    """Insert the fixture through ``storage``'s create operations.

    Product references are remapped onto the ids the backend actually assigned,
    so the fixture also loads into a database whose sequences do not start at 1.
    """
    type_ids = {
        position: storage.create_product_type(entry).id
        for position, entry in enumerate(PRODUCT_TYPES, start=1)
    }
    collection_ids = {
        position: storage.create_collection(entry).id
        for position, entry in enumerate(COLLECTIONS, start=1)
    }
    for entry in PRODUCTS:
        storage.create_product(
            replace(
                entry,
                collection_id=collection_ids[entry.collection_id],
                product_type_id=type_ids[entry.product_type_id],
                prices=dict(entry.prices),
            )
        )
    for entry in ARTICLES:
        storage.create_article(entry)
