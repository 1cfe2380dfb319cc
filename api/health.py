from flask import Blueprint, current_app

from models.author import Author
from models.book import Book

bp = Blueprint("health", __name__)

@bp.get("/health")
def health():
    """
    Health check
    ---
    tags:
      - Health
    responses:
      200:
        description: API is up
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            version:
              type: string
              example: 1.0.0
            counts:
              type: object
              properties:
                authors: { type: integer, example: 2 }
                books: { type: integer, example: 3 }
    """
    storage = current_app.extensions["storage"]
    counts = {"authors": storage.count(Author), "books": storage.count(Book)}
    return {"status": "ok", "version": "1.0.0", "counts": counts}, 200
