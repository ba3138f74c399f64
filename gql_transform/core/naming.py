"""Identifier casing helpers exposed to templates."""


def split_by_case(name: str) -> list[str]:
    """Split an identifier into lowercase words.

    Words break before every uppercase letter and at underscores, so an
    acronym becomes one word per letter: ``helloHTTP`` gives
    ``["hello", "h", "t", "t", "p"]``.
    """
    words = []
    current = ""
    for char in name:
        if char == "_":
            if current:
                words.append(current)
            current = ""
        elif char.isupper():
            if current:
                words.append(current)
            current = char.lower()
        else:
            current += char
    if current:
        words.append(current)
    return words


def camel_case(name: str) -> str:
    """Convert an identifier to camelCase, e.g. ``hello_world`` -> ``helloWorld``."""
    words = split_by_case(name)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def pascal_case(name: str) -> str:
    """Convert an identifier to PascalCase, e.g. ``hello_world`` -> ``HelloWorld``."""
    return "".join(word.capitalize() for word in split_by_case(name))
