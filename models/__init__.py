from models.author import Author
from models.book import Book
from models.memory_storage import MemoryStorage, SEED_DATA

__all__ = ["Author", "Book", "MemoryStorage", "SEED_DATA"]
