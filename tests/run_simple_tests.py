#!/usr/bin/env python3
"""
Simple test runner for the json2struct project.
This runner doesn't require pytest and can run basic tests.
"""

import sys
import os
import json

# Add the parent directory to the path so we can import the main modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from languages import get_language_formatter, supported_languages
from naming import type_name_from_array_key
from type_inference import generate_types, infer_records, root_first

def run_test(test_name, test_func):
    """Run a single test function and report results."""
    try:
        test_func()
        print(f"✅ {test_name}")
        return True
    except Exception as e:
        print(f"❌ {test_name}: {str(e)}")
        import traceback
        traceback.print_exc()
        return False

def test_depluralization():
    """Test that array keys are turned into singular type names."""
    test_cases = [
        ("categories", "Category"),
        ("users", "User"),
        ("data", "Data"),
    ]

    for key, expected in test_cases:
        assert type_name_from_array_key(key) == expected, f"Failed for key: {key}"

def test_degenerate_documents():
    """Test that documents without objects produce no definitions."""
    for document in ([], [1, 2, 3], "text", 3.5, None):
        assert generate_types(document) == [], f"Failed for document: {document!r}"

def test_single_field():
    """Test a flat object with one integer field."""
    structs = generate_types({"a": 1})
    assert structs == ["type AutoGenerated struct {\n\tA\tint\t\t`json:\"a\"`\n}"]

def test_nested_object():
    """Test that a nested object yields its own record before the root."""
    structs = generate_types({"user": {"id": 1, "name": "x"}})
    assert len(structs) == 2
    assert structs[0].startswith("type User struct {")
    assert "\tUser\tUser\t\t`json:\"user\"`\n" in structs[1]

def test_null_array_optionality():
    """Test that a null among the elements makes the element type optional."""
    assert "[]*int" in generate_types({"ids": [1, None]})[0]
    assert "[]int" in generate_types({"ids": [1, 2]})[0]

def test_first_element_only():
    """Test that keys only present in later array elements are dropped."""
    records = infer_records({"items": [{"a": 1}, {"a": 2, "b": 3}]}, get_language_formatter('go'))
    assert records[0].keys == ["a"]

def test_root_first():
    """Test that the root record is moved to the front for display."""
    document = json.loads('{"user": {"id": 1}}')
    ordered = root_first(generate_types(document))
    assert ordered[0].startswith("type AutoGenerated struct")

def test_every_language_renders():
    """Test that every registered language renders the same number of records."""
    document = {"user": {"id": 1}, "tags": ["x", None], "items": [{"n": 1.5}]}
    for language in supported_languages():
        structs = generate_types(document, get_language_formatter(language))
        assert len(structs) == 3, f"Failed for language: {language}"

def main():
    """Run all tests and report results."""
    print("Running tests for json2struct...")
    print("=" * 50)

    tests = [
        ("De-pluralization", test_depluralization),
        ("Degenerate Documents", test_degenerate_documents),
        ("Single Field", test_single_field),
        ("Nested Object", test_nested_object),
        ("Null Array Optionality", test_null_array_optionality),
        ("First Element Only", test_first_element_only),
        ("Root First", test_root_first),
        ("Every Language Renders", test_every_language_renders),
    ]

    passed = 0
    failed = 0

    for test_name, test_func in tests:
        if run_test(test_name, test_func):
            passed += 1
        else:
            failed += 1

    print("=" * 50)
    print(f"Tests completed: {passed} passed, {failed} failed")

    if failed == 0:
        print("🎉 All tests passed!")
        return 0
    else:
        print(f"❌ {failed} test(s) failed")
        return 1

if __name__ == "__main__":
    sys.exit(main())
