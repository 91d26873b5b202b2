"""
Typing Module

Binds document stores to Python document types. Documents are serialized into BSON
field by field, and deserialized by interpreting the type annotations of the target type.
"""

from .codec import DocumentCodec, DataclassCodec, DictCodec
from .serialization.obj_to_bson import obj_to_bson
from .serialization.bson_to_type_annotation import bson_to_type_annotation
