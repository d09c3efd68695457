"""
Tests for record normalization.
"""
import pytest
from helpers.normalization_helpers import is_blank, normalize_record, normalize_records, to_display_text
from helpers.schema_helpers import derive_schema


def test_ragged_records_get_schema_keys():
    """[{a:"2", b:"x"}, {a:"10"}] -> second record gains b = ''."""
    records = [{'a': '2', 'b': 'x'}, {'a': '10'}]
    keys = derive_schema(records)
    assert keys == ['a', 'b']
    assert normalize_records(records, keys) == [
        {'a': '2', 'b': 'x'},
        {'a': '10', 'b': ''}
    ]


@pytest.mark.parametrize('value', ['', 0, 0.0, None, False, float('nan')])
def test_falsy_values_normalize_to_empty(value):
    assert normalize_record({'a': value}, ['a']) == {'a': ''}


def test_missing_key_normalizes_to_empty():
    assert normalize_record({}, ['a']) == {'a': ''}


def test_key_set_equals_schema():
    keys = ['x', 'y', 'z']
    records = [{'x': 1}, {'y': 2, 'extra': 3}, {}]
    for record in normalize_records(records, keys):
        assert list(record) == keys


def test_truthy_values_become_text():
    record = normalize_record(
        {'s': 'hi', 'i': 7, 'f': 2.5, 'whole': 3.0, 't': True, 'l': [1, 2], 'zero': '0'},
        ['s', 'i', 'f', 'whole', 't', 'l', 'zero']
    )
    assert record == {
        's': 'hi', 'i': '7', 'f': '2.5', 'whole': '3', 't': 'true', 'l': '[1,2]', 'zero': '0'
    }


def test_non_mapping_record_is_all_empty():
    assert normalize_record('oops', ['a', 'b']) == {'a': '', 'b': ''}


def test_source_record_not_mutated():
    source = {'a': 1}
    normalize_record(source, ['a', 'b'])
    assert source == {'a': 1}


def test_is_blank():
    assert is_blank('')
    assert not is_blank(' ')
    assert not is_blank('0')
    assert not is_blank({})
    assert to_display_text({'k': 'v'}) == '{"k":"v"}'
