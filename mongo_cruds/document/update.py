from dataclasses import dataclass
from datetime import datetime
from collections.abc import Iterable, Mapping
from typing import Any

from .update_method import UpdateMethod
from ..typing.serialization.obj_to_bson import obj_to_bson


CREATED = "created"
UPDATED = "updated"


@dataclass(frozen=True)
class UpdateInstruction:
	""" Sets the field at path to value. Paths use Mongo dot notation. """
	path: str
	value: Any


Updates = Mapping[str, Any] | Iterable[UpdateInstruction]

def to_instructions(updates: Updates) -> list[UpdateInstruction]:
	""" Normalizes a field path -> value mapping or a sequence of UpdateInstructions into a list of UpdateInstructions. """
	if updates is None:
		raise TypeError("updates must not be None. Pass an empty mapping for a no-op update.")
	if isinstance(updates, Mapping):
		return [UpdateInstruction(path, value) for path, value in updates.items()]

	instructions = list(updates)
	for instruction in instructions:
		if not isinstance(instruction, UpdateInstruction):
			raise TypeError(f"Expected UpdateInstruction, but got {type(instruction).__name__}")
	return instructions

def timestamp_instructions(update_method: UpdateMethod, now: datetime) -> list[UpdateInstruction]:
	""" Inserts stamp both created and updated; updates only advance updated. """
	if update_method is UpdateMethod.INSERT:
		return [UpdateInstruction(CREATED, now), UpdateInstruction(UPDATED, now)]
	return [UpdateInstruction(UPDATED, now)]

def to_set_operations(instructions: Iterable[UpdateInstruction]) -> dict[str, Any]:
	""" One $set entry per instruction. Field paths are not validated here, Mongo does that. """
	return { instruction.path: obj_to_bson(instruction.value) for instruction in instructions }

def to_update_document(instructions: Iterable[UpdateInstruction]) -> dict[str, Any]:
	return { "$set": to_set_operations(instructions) }
