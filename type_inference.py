#!/usr/bin/env python3
"""
Infer record types from a parsed JSON document.

Objects become records named after the key that introduced them, arrays are
typed from their first non-null element, and scalars map to the target
language's primitive names. Records are collected depth first: every nested
record is listed before the record that references it.
"""

from languages import DEFAULT_LANGUAGE, get_language_formatter
from naming import AUTO_GENERATED
from type_model import ArrayOf, Named, Primitive, RecordDefinition, get_json_type


def infer_record(type_name, obj, formatter, records):
    """Infer a record for a JSON object, appending it after its nested records."""
    record = RecordDefinition(type_name)

    for key, value in obj.items():
        if isinstance(value, dict):
            nested_name = formatter.type_name(key)
            infer_record(nested_name, value, formatter, records)
            record.add_field(key, Named(nested_name))
        elif isinstance(value, list):
            record.add_field(key, infer_array(key, value, formatter, records))
        else:
            record.add_field(key, Primitive(get_json_type(value)))

    records.append(record)
    return record


def infer_array(key, array, formatter, records):
    """
    Infer the type of a JSON array.

    Only the first non-null element is inspected, later elements never
    change the result. Records found inside the element are appended to
    records.
    """
    optional = any(element is None for element in array)
    candidates = [element for element in array if element is not None]

    if not candidates:
        return ArrayOf(Primitive("null"), optional)

    first = candidates[0]
    if isinstance(first, list):
        return ArrayOf(infer_array(key, first, formatter, records), optional)
    elif isinstance(first, dict):
        type_name = formatter.type_name_from_array_key(key if key is not None else AUTO_GENERATED)
        infer_record(type_name, first, formatter, records)
        return ArrayOf(Named(type_name), optional)
    return ArrayOf(Primitive(get_json_type(first)), optional)


def infer_records(value, formatter):
    """Returns the RecordDefinitions for a document in discovery order."""
    records = []
    if isinstance(value, list):
        # A bare array has no record of its own
        infer_array(None, value, formatter, records)
    elif isinstance(value, dict):
        infer_record(AUTO_GENERATED, value, formatter, records)
    return records


def render_type(inferred, formatter):
    """Spell an inferred type in the formatter's language."""
    if isinstance(inferred, Named):
        return inferred.name
    elif isinstance(inferred, ArrayOf):
        return formatter.format_array_type(render_type(inferred.element, formatter), inferred.optional)
    return formatter.primitive_name(inferred.kind)


def render_record(record, formatter):
    content = formatter.header(record.name)
    for f in record.fields:
        content += formatter.format_field(render_type(f.type, formatter), f.key)
    content += formatter.footer(record.name)
    return content


def generate_types(value, formatter=None):
    """Generate type definitions for a parsed JSON document, in discovery order."""
    if formatter is None:
        formatter = get_language_formatter(DEFAULT_LANGUAGE)
    return [render_record(record, formatter) for record in infer_records(value, formatter)]


def root_first(structs):
    """
    Reorder generated definitions for display.

    The top-level record, the root object's record or the record of a
    top-level array's elements, is always discovered last; it is moved to the
    front so it reads first. The rest keep discovery order.
    """
    if structs:
        return [structs[-1]] + structs[:-1]
    return list(structs)
