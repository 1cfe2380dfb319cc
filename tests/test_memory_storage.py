import json

import pytest
from marshmallow import ValidationError

from models.author import Author
from models.book import Book
from models.memory_storage import MemoryStorage


def test_reload_loads_builtin_seed_in_order(storage):
    assert [a.name for a in storage.all(Author)] == ["F. Scott Fitzgerald", "Sir-Adekunle"]
    assert [b.id for b in storage.all(Book)] == ["1", "2", "3"]
    assert storage.get(Book, "3").author_id == "1"
    assert storage.count() == 5


def test_all_returns_a_copy(storage):
    books = storage.all(Book)
    books.clear()
    assert storage.count(Book) == 3


def test_get_missing_returns_none(storage):
    assert storage.get(Author, "99") is None


def test_new_assigns_next_id(storage):
    author = storage.new(Author(name="Chinua Achebe"))
    assert author.id == "3"
    assert storage.all(Author)[-1] is author


def test_ids_are_not_reused_after_delete(storage):
    storage.delete(storage.get(Book, "3"))
    assert storage.count(Book) == 2
    book = storage.new(Book(title="Things Fall Apart", author_id="2"))
    assert book.id == "4"
    assert len({b.id for b in storage.all(Book)}) == storage.count(Book)


def test_delete_where_removes_matches_only(storage):
    removed = storage.delete_where(Book, author_id="1")
    assert removed == 2
    assert [b.id for b in storage.all(Book)] == ["2"]


def test_unknown_class_is_rejected(storage):
    with pytest.raises(KeyError):
        storage.all("Publisher")


def test_reload_rejects_dangling_seed_reference():
    store = MemoryStorage()
    seed = {
        "authors": [{"id": "1", "name": "A"}],
        "books": [{"id": "1", "title": "B", "authorId": "7"}],
    }
    with pytest.raises(ValidationError) as exc:
        store.reload(seed)
    assert "books" in exc.value.messages


def test_reload_rejects_duplicate_ids():
    store = MemoryStorage()
    seed = {"authors": [{"id": "1", "name": "A"}, {"id": "1", "name": "B"}]}
    with pytest.raises(ValidationError) as exc:
        store.reload(seed)
    assert "authors" in exc.value.messages


def test_load_file_and_counter_follows_largest_id(tmp_path):
    seed = {
        "authors": [{"id": "10", "name": "Ngugi wa Thiong'o"}],
        "books": [{"id": "a", "title": "Weep Not, Child", "authorId": "10"}],
    }
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(seed), encoding="utf-8")

    store = MemoryStorage()
    store.load_file(str(path))

    assert store.get(Book, "a").author_id == "10"
    assert store.new(Author(name="Wole Soyinka")).id == "11"
    assert store.new(Book(title="Petals of Blood", author_id="10")).id == "2"


def test_to_dict_uses_external_names(storage):
    d = storage.get(Book, "1").to_dict()
    assert d["authorId"] == "1"
    assert d["title"] == "A Time to Kill"
    assert d["__class__"] == "Book"


def test_non_ascii_digit_ids_are_not_counted():
    store = MemoryStorage()
    store.reload({"authors": [{"id": "²", "name": "Superscript"}], "books": []})
    assert store.get(Author, "²").name == "Superscript"
    assert store.new(Author(name="Next")).id == "2"


def test_delete_of_unstored_record_is_harmless(storage):
    storage.delete(Book(title="Never stored", author_id="1"))
    assert storage.count(Book) == 3
