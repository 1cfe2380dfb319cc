from models.base_model import BaseModel


class Book(BaseModel):
    FIELD_ALIASES = {"author_id": "authorId"}

    def __init__(self, *args, **kwargs):
        self.title = None
        # weak reference: Author.id, not an owned object
        self.author_id = None
        super().__init__(*args, **kwargs)
