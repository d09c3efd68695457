"""
Tests for SortableTable: header activation, direction toggle and refresh signal.
"""
import unittest
from unittest.mock import Mock

from helpers.schema_helpers import Direction
from helpers.sortable_table import SortableTable
from helpers.sorting_helpers import SortType


def _prices(table):
    return [row['price'] for row in table.rows]


class TestSortableTableConstruction(unittest.TestCase):

    def test_schema_and_rows_are_normalized(self):
        table = SortableTable([{'a': '2', 'b': 'x'}, {'a': '10'}])
        self.assertEqual(table.schema.keys, ['a', 'b'])
        self.assertEqual(table.rows, [{'a': '2', 'b': 'x'}, {'a': '10', 'b': ''}])
        for row in table.rows:
            self.assertEqual(len(row), len(table.schema))

    def test_empty_input(self):
        table = SortableTable()
        self.assertEqual(len(table.schema), 0)
        self.assertEqual(table.rows, [])
        table.activate_column('price')
        self.assertEqual(table.rows, [])


class TestActivateColumn(unittest.TestCase):

    def setUp(self):
        self.table = SortableTable([
            {'name': 'b', 'price': '10'},
            {'name': 'a', 'price': '2'},
            {'name': 'c', 'price': '7'}
        ])

    def test_first_activation_sorts_desc(self):
        self.table.activate_column('price')
        self.assertIs(self.table.schema.direction_of('price'), Direction.DESCENDING)
        self.assertEqual(_prices(self.table), ['2', '7', '10'])

    def test_second_activation_sorts_asc(self):
        self.table.activate_column('price')
        self.table.activate_column('price')
        self.assertIs(self.table.schema.direction_of('price'), Direction.ASCENDING)
        self.assertEqual(_prices(self.table), ['10', '7', '2'])

    def test_toggle_never_returns_to_none(self):
        seen = []
        for _ in range(5):
            self.table.activate_column('price')
            seen.append(self.table.schema.direction_of('price'))
        self.assertNotIn(Direction.NONE, seen)
        self.assertEqual(seen[0], seen[2])
        self.assertNotEqual(seen[0], seen[1])

    def test_activation_is_exclusive(self):
        self.table.activate_column('price')
        self.table.activate_column('name')
        active = [c for c in self.table.schema if c.direction is not Direction.NONE]
        self.assertEqual([c.key for c in active], ['name'])

    def test_switching_columns_starts_fresh(self):
        self.table.activate_column('price')
        self.table.activate_column('price')
        self.table.activate_column('name')
        # price was reset, so its next activation is desc again
        self.table.activate_column('price')
        self.assertIs(self.table.schema.direction_of('price'), Direction.DESCENDING)

    def test_unknown_column_is_noop(self):
        self.table.activate_column('price')
        before_rows = list(self.table.rows)
        before_dirs = self.table.schema.to_list()
        listener = Mock()
        self.table.add_refresh_listener(listener)

        self.table.activate_column('missing')

        self.assertEqual(self.table.rows, before_rows)
        self.assertEqual(self.table.schema.to_list(), before_dirs)
        listener.assert_not_called()

    def test_refresh_listener_called_after_sort(self):
        listener = Mock()
        self.table.add_refresh_listener(listener)
        self.table.activate_column('name')
        listener.assert_called_once_with(self.table)

    def test_rows_keep_identity(self):
        ids = {id(row) for row in self.table.rows}
        self.table.activate_column('name')
        self.assertEqual({id(row) for row in self.table.rows}, ids)

    def test_active_direction(self):
        self.assertIs(self.table.active_direction, Direction.NONE)
        self.table.activate_column('name')
        self.assertIs(self.table.active_direction, Direction.DESCENDING)


class TestTableOptions(unittest.TestCase):

    def test_not_sortable_ignores_activation(self):
        table = SortableTable([{'price': '10'}, {'price': '2'}], sortable=False)
        table.activate_column('price')
        self.assertEqual(_prices(table), ['10', '2'])
        self.assertIsNone(table.schema.active_column)

    def test_custom_sort_types(self):
        table = SortableTable(
            [{'qty': '9', 'price': '10'}, {'qty': '10', 'price': '2'}, {'qty': '1', 'price': '7'}],
            sort_types={'qty': SortType.NUMBER}
        )
        table.activate_column('qty')
        self.assertEqual([row['qty'] for row in table.rows], ['1', '9', '10'])

        # columns missing from sort_types keep their default type
        table.activate_column('price')
        self.assertEqual(_prices(table), ['2', '7', '10'])

    def test_reload_resets_state_and_notifies(self):
        table = SortableTable([{'price': '1'}])
        table.activate_column('price')
        listener = Mock()
        table.add_refresh_listener(listener)

        table.reload([{'x': 'a'}, {'y': 'b'}])

        self.assertEqual(table.schema.keys, ['x', 'y'])
        self.assertEqual(table.rows, [{'x': 'a', 'y': ''}, {'x': '', 'y': 'b'}])
        self.assertIsNone(table.schema.active_column)
        listener.assert_called_once_with(table)

    def test_to_dict(self):
        table = SortableTable([{'a': '1'}])
        table.activate_column('a')
        self.assertEqual(table.to_dict(), {
            'columns': [{'key': 'a', 'label': 'a', 'direction': 'desc'}],
            'rows': [{'a': '1'}]
        })


if __name__ == '__main__':
    unittest.main()
