# tests/0_independant/test_quote_list.py

import convene.utils.utils_text as mod_utils_text


def test_quote_list_joins_with_and() -> None:
    # --- execute ---
    result = mod_utils_text.quote_list(["a", "b", "c"])

    # --- verify ---
    assert result == "'a', 'b' and 'c'"


def test_quote_list_two_items() -> None:
    assert mod_utils_text.quote_list(["a", "b"]) == "'a' and 'b'"


def test_quote_list_single_item() -> None:
    assert mod_utils_text.quote_list(["a"]) == "'a'"


def test_plural() -> None:
    assert mod_utils_text.plural(1) == ""
    assert mod_utils_text.plural(2) == "s"
    assert mod_utils_text.plural(["x"]) == ""
    assert mod_utils_text.plural([]) == "s"
