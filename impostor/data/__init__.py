"""Word pool data source for the Impostor word game"""

from .word_pool import DEFAULT_SEED_FILE, WordPool

__all__ = ["DEFAULT_SEED_FILE", "WordPool"]
