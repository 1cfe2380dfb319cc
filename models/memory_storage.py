import json
import logging
import threading

from models.author import Author
from models.book import Book
from models.schemas.seed import SeedSchema

logger = logging.getLogger(__name__)

# Map model names for easy lookups
classes = {
    "Author": Author,
    "Book": Book,
}

SEED_DATA = {
    "authors": [
        {"id": "1", "name": "F. Scott Fitzgerald"},
        {"id": "2", "name": "Sir-Adekunle"},
    ],
    "books": [
        {"id": "1", "title": "A Time to Kill", "authorId": "1"},
        {"id": "2", "title": "A Good Man is Hard to Find", "authorId": "2"},
        {"id": "3", "title": "Tender Is the Night", "authorId": "1"},
    ],
}

seed_schema = SeedSchema()


class MemoryStorage:
    """
    Process-lifetime store: one ordered list per model class.

    Lookups are linear scans. Deletes rebuild the list without the removed
    records. Callers that read-modify-write must hold ``lock``.
    """

    def __init__(self):
        self.__objects = {name: [] for name in classes}
        self.__counters = {name: 0 for name in classes}
        self.lock = threading.RLock()

    def reload(self, seed=None):
        """Replace the contents with seed data (built-in seed when None)"""
        data = seed_schema.load(SEED_DATA if seed is None else seed)
        with self.lock:
            self.__objects = {
                "Author": list(data["authors"]),
                "Book": list(data["books"]),
            }
            for name, objs in self.__objects.items():
                numeric = [int(o.id) for o in objs if o.id.isascii() and o.id.isdigit()]
                self.__counters[name] = max([len(objs), *numeric])
        logger.info(
            "Store loaded: %d authors, %d books",
            self.count(Author), self.count(Book),
        )

    def load_file(self, path):
        """Reload from a JSON seed file"""
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
        logger.info("Loading seed file %s", path)
        self.reload(payload)

    def _name(self, cls):
        name = cls if isinstance(cls, str) else cls.__name__
        if name not in classes:
            raise KeyError(f"Unknown model class: {name}")
        return name

    def all(self, cls):
        """Records of one class, in store order"""
        return list(self.__objects[self._name(cls)])

    def next_id(self, cls):
        """Advance the id counter of a class; ids are never reused"""
        name = self._name(cls)
        with self.lock:
            self.__counters[name] += 1
            return str(self.__counters[name])

    def new(self, obj):
        """Append object, assigning an id when it has none"""
        name = self._name(type(obj))
        with self.lock:
            if obj.id is None:
                obj.id = self.next_id(name)
            self.__objects[name].append(obj)
        return obj

    def delete(self, obj):
        """Remove object if present"""
        name = self._name(type(obj))
        with self.lock:
            self.__objects[name] = [o for o in self.__objects[name] if o is not obj]

    def delete_where(self, cls, **attrs):
        """Remove every object whose attributes match attrs; return how many"""
        name = self._name(cls)

        def matches(obj):
            return all(getattr(obj, k, None) == v for k, v in attrs.items())

        with self.lock:
            before = len(self.__objects[name])
            self.__objects[name] = [o for o in self.__objects[name] if not matches(o)]
            return before - len(self.__objects[name])

    def get(self, cls, id):
        """First object of a class with the given id, or None"""
        for obj in self.__objects[self._name(cls)]:
            if obj.id == id:
                return obj
        return None

    def count(self, cls=None):
        """Count objects"""
        if cls:
            return len(self.__objects[self._name(cls)])
        return sum(len(objs) for objs in self.__objects.values())
