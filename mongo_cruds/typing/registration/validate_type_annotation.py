import dataclasses
from datetime import datetime
from typing import Any, get_type_hints

from .get_type_expectation_from_type_annotation import get_type_expectation_from_type_annotation


SUPPORTED_LEAF_TYPES: frozenset[type] = frozenset({dict, datetime, str, float, int, bool})

def validate_type_annotation(type_annotation: Any, owner: str, seen: set[type] | None = None) -> None:
	""" Raises ValueError unless every value of this annotation can be read back from BSON.
	Walks list and tuple element types and the fields of nested dataclasses. """
	from ...document.document_id import DocumentId

	if seen is None:
		seen = set()

	try:
		type_expectation = get_type_expectation_from_type_annotation(type_annotation)
	except (ValueError, NotImplementedError) as e:
		raise ValueError(f"Unsupported annotation '{type_annotation}' on {owner}: {e}") from e

	expected_type = type_expectation.type_info.type_

	if dataclasses.is_dataclass(expected_type):
		validate_dataclass_fields(expected_type, seen)

	elif expected_type in (list, tuple):
		if type_expectation.type_info.sub_type is None:
			raise ValueError(f"Unsupported annotation '{type_annotation}' on {owner}: declare the element type, e.g. list[str].")
		validate_type_annotation(type_expectation.type_info.sub_type, f"the elements of {owner}", seen)

	elif expected_type is not DocumentId and expected_type not in SUPPORTED_LEAF_TYPES:
		raise ValueError(f"Unsupported annotation '{type_annotation}' on {owner}.")

def validate_dataclass_fields(cls: type, seen: set[type] | None = None) -> None:
	""" Checks every init field of a dataclass. Self-referencing dataclasses are checked once. """
	if seen is None:
		seen = set()
	if cls in seen:
		return
	seen.add(cls)

	type_hints = get_type_hints(cls)
	for field in dataclasses.fields(cls): # type: ignore[arg-type]
		if not field.init:
			continue
		validate_type_annotation(type_hints[field.name], f"{cls.__name__}.{field.name}", seen)
