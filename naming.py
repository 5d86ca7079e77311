#!/usr/bin/env python3
"""
Identifier helpers shared by the language formatters.

JSON keys are usually snake_case. Type names are PascalCase in every
supported language, field names are PascalCase or camelCase depending on
the language, so both transforms live here and each formatter picks one.
"""

AUTO_GENERATED = "AutoGenerated"


def first_char_upper(word):
    """Upper-case the first character of a word, leave the rest alone."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def to_type_name(key):
    """user_profile -> UserProfile"""
    return "".join(first_char_upper(segment) for segment in key.split("_"))


def to_field_name(key):
    """user_profile -> userProfile"""
    first, *rest = key.split("_")
    return first + "".join(first_char_upper(segment) for segment in rest)


def type_name_from_array_key(key, type_name=to_type_name):
    """
    Derive a singular type name from the key of an array of objects.

    categories -> Category, users -> User, data -> Data. There is no
    knowledge of irregular plurals and the stripped form may be empty.
    """
    if key.endswith("ies"):
        return type_name(key[:-3] + "y")
    elif key.endswith("s"):
        return type_name(key[:-1])
    return type_name(key)
