"""docview: encode and decode repository properties as document-view attribute values.

Typical usage::

    from docview import DocViewProperty, PropertyType

    prop = DocViewProperty.parse("jcr:title", "{String}[hello\\,world,again]")
    payload = DocViewProperty("count", ["1234"], False, PropertyType.LONG).format()
"""

__version__ = "1.0.0"

from docview.encoding.escape import escape, unescape
from docview.encoding.property import (
    decode_property,
    encode_property_value,
    format_property,
    property_from_values,
)
from docview.errors import (
    DocViewError,
    MalformedEscapeError,
    ReferenceResolutionError,
    UnknownTypeTagError,
)
from docview.serialization import deserialize, serialize
from docview.types.enums import PropertyType, type_from_name, type_name
from docview.types.property import DocViewProperty
from docview.types.values import ReferenceBinary, SimpleReferenceBinary

__all__ = [
    "DocViewError",
    "DocViewProperty",
    "MalformedEscapeError",
    "PropertyType",
    "ReferenceBinary",
    "ReferenceResolutionError",
    "SimpleReferenceBinary",
    "UnknownTypeTagError",
    "__version__",
    "decode_property",
    "deserialize",
    "encode_property_value",
    "escape",
    "format_property",
    "property_from_values",
    "serialize",
    "type_from_name",
    "type_name",
    "unescape",
]
