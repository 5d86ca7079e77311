#!/usr/bin/env python3

from naming import AUTO_GENERATED, to_field_name, to_type_name, type_name_from_array_key
from type_model import PRIMITIVE_KINDS, get_json_type

DEFAULT_LANGUAGE = 'go'


class UnsupportedLanguageError(ValueError):
    """Raised when no formatter is registered for a language identifier."""

    def __init__(self, language):
        self.language = language
        super().__init__(f"Unsupported language: '{language}' (supported: {', '.join(supported_languages())})")


class LanguageFormatter:
    """
    Syntax for one target language.

    The inference engine decides what the records look like; a formatter only
    decides how they are spelled. Subclasses set PRIMITIVE_NAMES, a table from
    JSON kind to the language's type name, and override the format hooks.
    """

    name = None
    PRIMITIVE_NAMES = {}

    def header(self, type_name):
        raise NotImplementedError

    def footer(self, type_name=None):
        return "}"

    def field_name(self, json_key):
        return to_type_name(json_key)

    def type_name(self, json_key):
        return to_type_name(json_key)

    def type_name_from_array_key(self, json_key):
        return type_name_from_array_key(json_key, self.type_name)

    def format_field(self, type_text, json_key):
        raise NotImplementedError

    def format_array_type(self, element_type, optional):
        raise NotImplementedError

    def primitive_name(self, kind):
        """Returns the type name for a JSON kind, the any type for non-scalars."""
        if kind not in PRIMITIVE_KINDS:
            kind = "null"
        return self.PRIMITIVE_NAMES[kind]

    def primitive_type_name(self, value):
        return self.primitive_name(get_json_type(value))


class Go(LanguageFormatter):
    name = 'go'
    PRIMITIVE_NAMES = {
        "boolean": "bool",
        "integer": "int",
        "number": "float64",
        "string": "string",
        "null": "interface{}",
    }

    def header(self, type_name):
        return f"type {type_name} struct {{\n"

    def format_field(self, type_text, json_key):
        return f"\t{self.field_name(json_key)}\t{type_text}\t\t`json:\"{json_key}\"`\n"

    def format_array_type(self, element_type, optional):
        # Nullable elements become pointers
        type_prefix = "*" if optional else ""
        return f"[]{type_prefix}{element_type}"


class Rust(LanguageFormatter):
    name = 'rust'
    PRIMITIVE_NAMES = {
        "boolean": "bool",
        "integer": "i64",
        "number": "f64",
        "string": "String",
        "null": "serde_json::Value",
    }

    def header(self, type_name):
        return f"pub struct {type_name} {{\n"

    def field_name(self, json_key):
        return json_key

    def format_field(self, type_text, json_key):
        return f"\tpub {self.field_name(json_key)}: {type_text},\n"

    def format_array_type(self, element_type, optional):
        if optional:
            element_type = f"Option<{element_type}>"
        return f"Vec<{element_type}>"


class Scala(LanguageFormatter):
    name = 'scala'
    PRIMITIVE_NAMES = {
        "boolean": "Boolean",
        "integer": "Int",
        "number": "Double",
        "string": "String",
        "null": "Any",
    }

    def header(self, type_name):
        return f"case class {type_name}(\n"

    def footer(self, type_name=None):
        # The closing paren is indented by one tab per 8 columns of the header
        header_len = len(self.header(type_name if type_name is not None else AUTO_GENERATED))
        return "\t" * (header_len // 8) + ")"

    def field_name(self, json_key):
        return to_field_name(json_key)

    def format_field(self, type_text, json_key):
        return f"\t\t{self.field_name(json_key)}: {type_text},\n"

    def format_array_type(self, element_type, optional):
        if optional:
            element_type = f"Option[{element_type}]"
        return f"Seq[{element_type}]"


class Java(LanguageFormatter):
    name = 'java'
    PRIMITIVE_NAMES = {
        "boolean": "boolean",
        "integer": "int",
        "number": "double",
        "string": "String",
        "null": "Object",
    }
    # Generics only take reference types
    BOXED = {
        "boolean": "Boolean",
        "int": "Integer",
        "double": "Double",
    }

    def header(self, type_name):
        return f"public class {type_name} {{\n"

    def field_name(self, json_key):
        return to_field_name(json_key)

    def format_field(self, type_text, json_key):
        return f"\tpublic {type_text} {self.field_name(json_key)};\n"

    def format_array_type(self, element_type, optional):
        # Every element of a List is already nullable, optional adds nothing
        return f"List<{self.BOXED.get(element_type, element_type)}>"


LANGUAGES = {
    'go': Go,
    'rust': Rust,
    'scala': Scala,
    'java': Java,
}


def supported_languages():
    """Returns the registered language identifiers."""
    return sorted(LANGUAGES)


def get_language_formatter(language):
    """Look up a formatter by case-insensitive language identifier."""
    key = (language or '').strip().lower()
    if key not in LANGUAGES:
        raise UnsupportedLanguageError(language)
    return LANGUAGES[key]()
