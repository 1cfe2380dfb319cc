from models.base_model import BaseModel


class Author(BaseModel):
    """A book author. Books point at authors, never the other way round."""

    def __init__(self, *args, **kwargs):
        self.name = None
        super().__init__(*args, **kwargs)
