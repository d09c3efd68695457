"""
Tests for schema derivation and direction state.
"""
import unittest

from helpers.schema_helpers import Direction, Schema, derive_schema


class TestDeriveSchema(unittest.TestCase):
    """Key order is first appearance across records."""

    def test_first_seen_order_across_records(self):
        records = [{'b': 1, 'a': 2}, {'c': 3, 'a': 4}, {'d': 5, 'b': 6}]
        self.assertEqual(derive_schema(records), ['b', 'a', 'c', 'd'])

    def test_empty_input(self):
        self.assertEqual(derive_schema([]), [])

    def test_record_without_keys_contributes_nothing(self):
        self.assertEqual(derive_schema([{}, {'x': 1}, {}]), ['x'])

    def test_non_mapping_items_are_ignored(self):
        self.assertEqual(derive_schema(['abc', {'x': 1}, 42, None]), ['x'])

    def test_deterministic(self):
        records = [{'z': 1, 'y': 2}, {'x': 3, 'z': 4}]
        self.assertEqual(derive_schema(records), derive_schema(records))

    def test_accepts_generator(self):
        self.assertEqual(derive_schema({'k': i} for i in range(3)), ['k'])


class TestDirection(unittest.TestCase):

    def test_toggle_from_none_goes_to_descending(self):
        self.assertIs(Direction.NONE.toggled(), Direction.DESCENDING)

    def test_toggle_alternates(self):
        self.assertIs(Direction.DESCENDING.toggled(), Direction.ASCENDING)
        self.assertIs(Direction.ASCENDING.toggled(), Direction.DESCENDING)

    def test_coerce_wire_values(self):
        self.assertIs(Direction.coerce('asc'), Direction.ASCENDING)
        self.assertIs(Direction.coerce('desc'), Direction.DESCENDING)
        self.assertIs(Direction.coerce(''), Direction.NONE)
        self.assertIs(Direction.coerce(None), Direction.NONE)
        self.assertIs(Direction.coerce('sideways'), Direction.NONE)
        self.assertIs(Direction.coerce(Direction.ASCENDING), Direction.ASCENDING)


class TestSchema(unittest.TestCase):

    def setUp(self):
        self.schema = Schema(['a', 'b', 'c'])

    def test_initial_state(self):
        self.assertEqual(self.schema.keys, ['a', 'b', 'c'])
        self.assertEqual([c.label for c in self.schema], ['a', 'b', 'c'])
        self.assertTrue(all(c.direction is Direction.NONE for c in self.schema))
        self.assertIsNone(self.schema.active_column)

    def test_duplicate_keys_collapse(self):
        self.assertEqual(Schema(['a', 'a', 'b']).keys, ['a', 'b'])

    def test_set_direction_is_exclusive(self):
        self.schema.set_direction('a', Direction.ASCENDING)
        self.schema.set_direction('c', Direction.DESCENDING)
        self.assertIs(self.schema.direction_of('a'), Direction.NONE)
        self.assertIs(self.schema.direction_of('c'), Direction.DESCENDING)
        self.assertEqual(self.schema.active_column.key, 'c')

    def test_set_direction_unknown_key_changes_nothing(self):
        self.schema.set_direction('a', Direction.ASCENDING)
        self.assertFalse(self.schema.set_direction('zzz', Direction.DESCENDING))
        self.assertIs(self.schema.direction_of('a'), Direction.ASCENDING)

    def test_unhashable_lookup(self):
        self.assertIsNone(self.schema.get(['a']))
        self.assertNotIn(['a'], self.schema)

    def test_to_list(self):
        self.schema.set_direction('b', Direction.ASCENDING)
        self.assertEqual(self.schema.to_list()[1], {'key': 'b', 'label': 'b', 'direction': 'asc'})

    def test_from_records(self):
        schema = Schema.from_records([{'a': 1}, {'b': 2}])
        self.assertEqual(len(schema), 2)
        self.assertIn('b', schema)


if __name__ == '__main__':
    unittest.main()
