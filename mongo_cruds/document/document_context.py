from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentContext:
    """ Identifies where a value came from when something goes wrong while reading or writing it. """
    collection_name: str
    document_id: str | None = None

    field_path: str | None = None
    """ Dot-notation path of the current field relative to the document root. Lists elements are rendered as [idx]. """

    def replace(self, field_path: str | None = None) -> DocumentContext:
        new_context = DocumentContext(
            collection_name=self.collection_name,
            document_id=self.document_id,
            field_path=field_path if field_path else self.field_path,
        )
        return new_context

    def subpath(self, field_name: str) -> DocumentContext:
        """ Returns a new DocumentContext pointing at a subfield of the current field path. """
        if self.field_path:
            return self.replace(field_path=f"{self.field_path}.{field_name}")
        return self.replace(field_path=field_name)

    def subidx(self, idx: int) -> DocumentContext:
        """ Returns a new DocumentContext pointing at a list element of the current field path. """
        return self.replace(field_path=f"{self.field_path or ''}[{idx}]")

    def __str__(self) -> str:
        """ Printable to logs. """
        output = f"Collection: {self.collection_name}\nDocument _id: {self.document_id}"
        if self.field_path:
            output += f"\nField path: {self.field_path}"
        return output
