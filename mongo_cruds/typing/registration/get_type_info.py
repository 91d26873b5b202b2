from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from .type_info import TypeInfo


def get_type_info(type_: Any) -> TypeInfo:
    """ Extracts type and subtype (if present) for a **single** (non-Union) type. """
    origin = get_origin(type_)

    if origin is Annotated:
        # Annotated[list, SomeAnnotation] is treated as list
        base_type = get_args(type_)[0]
        return get_type_info(base_type)
    elif origin in {Union, UnionType}:
        raise ValueError("This function should only be used for single types.")
    elif origin is dict:
        # For now, we don't store any sub type information for a dict
        return TypeInfo(
            type_=dict,
            sub_type=None
        )
    elif origin is list:
        args = get_args(type_)
        if len(args) != 1:
            raise ValueError(f"Unable to get type info for list annotation '{type_}'. Lists must declare exactly one element type.")
        return TypeInfo(
            type_=list,
            sub_type=args[0]
        )
    elif origin is tuple:
        # Only homogeneous tuples, stored as BSON arrays
        args = get_args(type_)
        if len(args) != 2 or args[1] is not Ellipsis:
            raise ValueError(f"Unable to get type info for tuple annotation '{type_}'. Only tuple[X, ...] is supported.")
        return TypeInfo(
            type_=tuple,
            sub_type=args[0]
        )
    elif origin is None:
        if type_ is Any:
            raise ValueError("Fields annotated with Any cannot be deserialized. Annotate them with a concrete type or use dict.")
        return TypeInfo(
            type_=type_,
            sub_type=None
        )
    else:
        raise ValueError(f"Unable to get type info for unsupported generic annotation '{type_}'.")


def get_type_info_list(type_annotation: Any) -> list[TypeInfo]:
    """ Take in a type_annotation (or type) and returns a list of the TypeInfos contained within it.

    For Unioned types, returns multiple TypeInfos. For non-Unioned types, returns a single TypeInfo.
    """
    origin = get_origin(type_annotation)

    if origin is Annotated:
        base_type = get_args(type_annotation)[0]
        return get_type_info_list(base_type)

    # For union types, return TypeInfo for each unioned type
    elif origin in {Union, UnionType}:
        return [get_type_info(unioned_type) for unioned_type in get_args(type_annotation)]

    # For single types, just return the TypeInfo for that
    else:
        return [get_type_info(type_annotation)]
