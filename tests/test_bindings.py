import pytest

from invoice_designer.domain.bindings import display_text, interpolate, placeholder, resolve

SAMPLE = {
    "invoiceNumber": "INV-2023-001",
    "provider": {"name": "Acme Corp", "address": {"city": "Tech City"}},
    "client": None,
    "discount": 0,
    "notes": None,
    "total": 676.5,
    "items": [{"description": "Hosting"}],
}


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("invoiceNumber", "INV-2023-001"),
        ("provider.name", "Acme Corp"),
        ("provider.address.city", "Tech City"),
        ("provider.address", {"city": "Tech City"}),
        ("discount", 0),
        ("total", 676.5),
    ],
)
def test_resolve_returns_nested_value_unchanged(path, expected):
    assert resolve(SAMPLE, path, "fallback") == expected


def test_resolve_through_null_intermediate_returns_fallback():
    assert resolve(SAMPLE, "client.name", "n/a") == "n/a"
    assert resolve(None, "anything", "n/a") == "n/a"


def test_resolve_missing_key_returns_fallback_or_none():
    assert resolve(SAMPLE, "provider.phone", "n/a") == "n/a"
    assert resolve(SAMPLE, "provider.phone") is None


def test_resolve_keeps_explicit_null_values():
    assert resolve(SAMPLE, "notes", "n/a") is None


def test_resolve_does_not_index_lists_or_scalars():
    assert resolve(SAMPLE, "items.0", "n/a") == "n/a"
    assert resolve(SAMPLE, "invoiceNumber.length", "n/a") == "n/a"


def test_resolve_cannot_address_keys_containing_dots():
    assert resolve({"a.b": 1}, "a.b", "n/a") == "n/a"


def test_interpolate_without_tokens_returns_input():
    text = "Thank you for your business"
    assert interpolate(text, SAMPLE) == text


def test_interpolate_replaces_resolved_tokens():
    assert interpolate("Hello {{name}}", {"name": "Ann"}) == "Hello Ann"


def test_interpolate_leaves_unresolved_tokens_literal():
    assert interpolate("Hello {{name}}", {}) == "Hello {{name}}"


def test_interpolate_trims_paths_and_handles_several_tokens():
    result = interpolate("{{ provider.name }} / {{invoiceNumber}} / {{missing}}", SAMPLE)
    assert result == "Acme Corp / INV-2023-001 / {{missing}}"


def test_interpolate_stringifies_non_string_values():
    assert interpolate("Total: {{total}} ({{discount}})", SAMPLE) == "Total: 676.5 (0)"
    assert interpolate("{{a}}{{b}}", {"a": 1, "b": 2.0}) == "12"


def test_placeholder_wraps_binding():
    assert placeholder("client.name") == "{{client.name}}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("text", "text"),
        (True, "true"),
        (10, "10"),
        (10.0, "10"),
        (10.25, "10.25"),
        ({"a": 1}, '{"a":1}'),
        ([1, "x"], '[1,"x"]'),
    ],
)
def test_display_text(value, expected):
    assert display_text(value) == expected
