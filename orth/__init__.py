# Core type aliases for Orth's data model.
# Runtime values are plain Python types wherever one fits (int, float, bool, str,
# list for Vec, dict for Map). The variants Python has no type for live in
# orth.types: Symbol, Word, Quotation, BuiltinRef and the QuoteOpen/QuoteClose
# markers.
#
# Note that bool is a subclass of int; code that distinguishes Int from Boolean
# must test for bool first.

import logging
from typing import Any, Callable

# Runtime value alias
OrthValue = Any

# Primitive signature: receives the execution context, returns nothing
BuiltinFn = Callable[..., None]

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
