"""
Utility functions for the API dump to code generator.
"""

# C# reserved keywords that need escaping
CS_RESERVED_KEYWORDS = {
    "abstract",
    "as",
    "base",
    "bool",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "checked",
    "class",
    "const",
    "continue",
    "decimal",
    "default",
    "delegate",
    "do",
    "double",
    "else",
    "enum",
    "event",
    "explicit",
    "extern",
    "false",
    "finally",
    "fixed",
    "float",
    "for",
    "foreach",
    "goto",
    "if",
    "implicit",
    "in",
    "int",
    "interface",
    "internal",
    "is",
    "lock",
    "long",
    "namespace",
    "new",
    "null",
    "object",
    "operator",
    "out",
    "override",
    "params",
    "private",
    "protected",
    "public",
    "readonly",
    "ref",
    "return",
    "sbyte",
    "sealed",
    "short",
    "sizeof",
    "stackalloc",
    "static",
    "string",
    "struct",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "uint",
    "ulong",
    "unchecked",
    "unsafe",
    "ushort",
    "using",
    "virtual",
    "void",
    "volatile",
    "while",
}


def make_safe_identifier(name: str) -> str:
    """Make a valid C# identifier from a raw API name.

    Examples:
        "Name" -> "Name"
        "Is Active" -> "IsActive"
        "3DMode" -> "_3DMode"
        "Mode-Flag" -> "Mode_Flag"
        "event" -> "@event"
        "" -> "_"

    Args:
        name: The raw name from the API dump

    Returns:
        A name usable as a C# identifier
    """
    if not name:
        return "_"

    chars = []
    for c in name:
        if c.isalnum() or c == "_":
            chars.append(c)
        elif c != " ":
            chars.append("_")
    result = "".join(chars)
    if not result:
        return "_"

    if result[0].isdigit():
        result = "_" + result

    if result in CS_RESERVED_KEYWORDS:
        return "@" + result

    return result


def escape_xml_doc(text: str | None) -> str:
    """Escape text for use inside XML doc comments."""
    if not text:
        return ""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
