"""Word and category pools loaded from seed files."""

import csv
import json
import logging
from pathlib import Path
from typing import Dict, List, Set, Union
from uuid import uuid4

from pydantic import BaseModel, Field

from impostor.types.player import Category, Word

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "seed_words.csv"


class WordPool(BaseModel):
    """
    Categories and words available to the game, plus their approval status.

    Only approved entries whose category resolves are handed to the engine.
    """
    categories: List[Category] = Field(default_factory=list)
    words: List[Word] = Field(default_factory=list)
    unapproved_ids: Set[str] = Field(
        default_factory=set,
        description="IDs of categories and words still awaiting moderation"
    )

    @classmethod
    def from_csv(cls, path: Union[str, Path]) -> "WordPool":
        """
        Load a `word,category` CSV with a header row.

        One category is created per distinct category name; every entry is
        approved.
        """
        categories: Dict[str, Category] = {}
        words: List[Word] = []

        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            next(reader, None)
            for row in reader:
                if not row or not any(field.strip() for field in row):
                    continue
                if len(row) < 2:
                    logger.warning(f"Skipping malformed seed row: {row}")
                    continue

                word_text, category_name = row[0].strip(), row[1].strip()
                if category_name not in categories:
                    categories[category_name] = Category(id=str(uuid4()), name=category_name)
                words.append(Word(
                    id=str(uuid4()),
                    word=word_text,
                    category_id=categories[category_name].id,
                ))

        logger.info(f"Loaded {len(words)} words in {len(categories)} categories from {path}")
        return cls(categories=list(categories.values()), words=words)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "WordPool":
        """Load `{"categories": [...], "words": [...]}` with optional `approved` flags."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        unapproved: Set[str] = set()
        categories = []
        for entry in data.get("categories", []):
            category = Category.model_validate(entry)
            if not entry.get("approved", True):
                unapproved.add(category.id)
            categories.append(category)

        words = []
        for entry in data.get("words", []):
            word = Word.model_validate(entry)
            if not entry.get("approved", True):
                unapproved.add(word.id)
            words.append(word)

        logger.info(f"Loaded {len(words)} words in {len(categories)} categories from {path}")
        return cls(categories=categories, words=words, unapproved_ids=unapproved)

    def approved_categories(self) -> List[Category]:
        return [c for c in self.categories if c.id not in self.unapproved_ids]

    def approved_words(self) -> List[Word]:
        """Approved words whose category is approved too."""
        category_ids = {c.id for c in self.approved_categories()}
        return [
            w for w in self.words
            if w.id not in self.unapproved_ids and w.category_id in category_ids
        ]

    def words_for_category(self, category_id: str) -> List[Word]:
        return [w for w in self.approved_words() if w.category_id == category_id]

    def orphan_words(self) -> List[Word]:
        """Words that reference a category missing from the pool."""
        category_ids = {c.id for c in self.categories}
        return [w for w in self.words if w.category_id not in category_ids]
