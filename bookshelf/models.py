# bookshelf/models.py
from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A single catalogue record.

    Books are immutable once built; two books with the same field values
    compare (and hash) equal. No field is validated beyond being a string,
    so empty names and authors are accepted.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    author: str
