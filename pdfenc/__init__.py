from ._pdf import Pdf, VERSION
from ._objects import (
    NULL,
    Array,
    Boolean,
    Dict,
    HexString,
    Indirect,
    Integer,
    LiteralString,
    Name,
    Null,
    Real,
    Reference,
    Stream,
    encode_text,
    wrap,
)
from ._context import DEFAULT_BUFFER_SIZE, EncodeContext, encode_object, encodes
from ._errors import EncodeError, TruncatedStream, UnsupportedObject
