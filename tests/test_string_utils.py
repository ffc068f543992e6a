import pytest

from sutcourses.string_utils import extract_value_in_brackets, trim_space


def test_extract_value_in_brackets_with_value():
    assert extract_value_in_brackets("The price is ( 100 USD )") == "100 USD"


def test_extract_value_in_brackets_no_brackets():
    assert extract_value_in_brackets("No brackets here") is None


def test_extract_value_in_brackets_empty_value():
    assert extract_value_in_brackets("The price is ()") == ""


def test_extract_value_in_brackets_nested_brackets():
    assert extract_value_in_brackets("The price is (100 USD (approx))") == "100 USD (approx"


def test_extract_value_in_brackets_doc_example():
    assert extract_value_in_brackets("The price is (100 USD)") == "100 USD"


def test_extract_value_in_brackets_only_opening():
    assert extract_value_in_brackets("open ( but never closed") is None


def test_extract_value_in_brackets_reversed_raises():
    with pytest.raises(ValueError):
        extract_value_in_brackets("a ) b ( c")


def test_trim_space_multiple_spaces():
    assert trim_space("  Hello   world!   How are you?  ") == "Hello world! How are you?"


def test_trim_space_leading_and_trailing_spaces():
    assert trim_space("   Multiple    spaces  in    between   ") == "Multiple spaces in between"


def test_trim_space_no_extra_spaces():
    assert trim_space("NoExtraSpacesHere") == "NoExtraSpacesHere"


def test_trim_space_empty_string():
    assert trim_space("   ") == ""


def test_trim_space_single_word():
    assert trim_space("   Rust   ") == "Rust"


def test_trim_space_doc_example():
    assert trim_space("  Hello   world!   ") == "Hello world!"


def test_trim_space_tabs_and_newlines_collapse():
    assert trim_space("a\t\tb\n\nc") == "a b c"