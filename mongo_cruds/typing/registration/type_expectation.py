from dataclasses import dataclass

from .type_info import TypeInfo


@dataclass
class TypeExpectation:
	type_info: TypeInfo
	is_nullable: bool

	def __str__(self) -> str:
		output = getattr(self.type_info.type_, "__name__", str(self.type_info.type_))
		if self.type_info.sub_type is not None:
			output += f"[{getattr(self.type_info.sub_type, '__name__', self.type_info.sub_type)}]"
		if self.is_nullable:
			output += " | None"

		return output
