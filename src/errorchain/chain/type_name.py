"""Recover a short type name from an error's debug text.

Debug output for a named type conventionally starts with the type's name
followed by its fields: ``ValueError('x')``, ``ParseIntError { kind: .. }``,
``InvalidProjectId``.  Taking the token before the first structural
delimiter recovers the name without reflection or a type registry.  Custom
representations that do not start with the name produce wrong (or empty)
results.
"""
from __future__ import annotations

import re

# space, "(", "{", CR, LF
_DELIMITERS = re.compile(r"[ ({\r\n]")

# Unicode White_Space.  str.strip() would also drop the separators U+001C..U+001F.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def extract_type_name(debug_text: str) -> str:
    """Return the token of *debug_text* preceding the first delimiter.

    Only the selected token is stripped, not the input: a string that
    *begins* with a delimiter yields ``""``, while leading whitespace that
    is not a delimiter (a tab, say) is removed.  Stripping uses the Unicode
    White_Space set, so control separators such as ``"\\x1c"`` are kept.

    Examples
    --------
    >>> extract_type_name("MyStruct { field: 1 }")
    'MyStruct'
    >>> extract_type_name("ValueError('bad')")
    'ValueError'
    >>> extract_type_name("\\tMyStruct(5)")
    'MyStruct'
    >>> extract_type_name(" MyStruct")
    ''
    """
    return _DELIMITERS.split(debug_text, maxsplit=1)[0].strip(_WHITESPACE)
