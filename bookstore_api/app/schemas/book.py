"""
Pydantic model for book records.

A single ``Book`` model is used for request bodies, responses and the
documents stored in MongoDB.  External names are capitalised (``Id``,
``Name``, ``Price``, ``Category``, ``Author``); in particular the
``book_name`` attribute is exposed as ``Name`` both on the wire and in
the persisted document.  In the collection the identifier lives in
``_id`` as an ObjectId and is rendered as a 24 character hex string
everywhere else.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

# A MongoDB ObjectId is 12 bytes, written as 24 hexadecimal characters.
BOOK_ID_PATTERN = r"^[0-9a-fA-F]{24}$"


class Book(BaseModel):
    id: Optional[str] = Field(
        None,
        alias="Id",
        description="Identifier assigned by the store; ignored on input",
        examples=["5bfd996f7b8e48dc15ff215d"],
    )
    book_name: str = Field(..., alias="Name", examples=["Dune"])
    price: float = Field(..., alias="Price", examples=[15.99])
    category: str = Field(..., alias="Category", examples=["Fiction"])
    author: str = Field(..., alias="Author", examples=["Frank Herbert"])

    model_config = {
        "populate_by_name": True,
    }

    def to_document(self) -> Dict[str, Any]:
        """Return the fields to persist, keyed by their external names.

        The identifier is left out: on insert the store assigns it and
        on replace it is taken from the filter.
        """
        return self.model_dump(by_alias=True, exclude={"id"})

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Book":
        """Build a ``Book`` from a stored document."""
        data = dict(document)
        object_id = data.pop("_id")
        return cls(id=str(object_id), **data)
