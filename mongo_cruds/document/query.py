from dataclasses import dataclass
from types import MappingProxyType
from collections.abc import Mapping, Sequence
from typing import Any

from ..typing.serialization.obj_to_bson import obj_to_bson


UNKNOWN_OPERATOR = "$unknown"
""" Sent for unrecognized operator tokens. Mongo rejects it when the query runs ("unknown operator"), so validation stays with the database. """

MONGO_OPERATORS: Mapping[str, str] = MappingProxyType({
	"EQ": "$eq",
	"NE": "$ne",
	"LT": "$lt",
	"GT": "$gt",
	"LE": "$lte",
	"GE": "$gte",
})

EQUALITY_OPERATORS = frozenset({"$eq"})
INEQUALITY_OPERATORS = frozenset({"$ne", "$lt", "$gt", "$lte", "$gte"})


@dataclass(frozen=True)
class Query:
	""" One filter term of a search. A search ANDs all of its terms together. """
	path: str
	""" Dot-notation field path. """
	operator: str
	""" One of EQ, NE, LT, GT, LE, GE (any case). """
	value: Any


def to_mongo_operator(token: str) -> str:
	""" Translates an operator token into Mongo's query operator. Never raises; unknown tokens become UNKNOWN_OPERATOR. """
	return MONGO_OPERATORS.get(str(token).upper(), UNKNOWN_OPERATOR)

def to_filter_clause(query: Query) -> dict[str, Any]:
	return { query.path: { to_mongo_operator(query.operator): obj_to_bson(query.value) } }

def build_filter(queries: Sequence[Query]) -> dict[str, Any]:
	""" Chains the queries into one conjunctive Mongo filter. The first query seeds the filter and each following query refines it. """
	mongo_filter: dict[str, Any] = {}
	for idx, query in enumerate(queries):
		clause = to_filter_clause(query)
		if idx == 0:
			mongo_filter = clause
		elif idx == 1:
			mongo_filter = { "$and": [mongo_filter, clause] }
		else:
			mongo_filter["$and"].append(clause)
	return mongo_filter

def find_unsupported_combination(queries: Sequence[Query]) -> str | None:
	""" Document stores are not required to combine equality with inequality or range filters in one query.
	Returns a description of the problem if the queries do so, otherwise None. """
	operators = {to_mongo_operator(query.operator) for query in queries}
	if operators & EQUALITY_OPERATORS and operators & INEQUALITY_OPERATORS:
		return "combining '==' with '!=, <, <=, >, >='"
	return None
