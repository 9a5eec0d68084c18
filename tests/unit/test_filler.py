"""
Unit tests for debug SQL rendering.
"""
import datetime

import pytest
from paramsql.exceptions import ParameterCountError, ValidationError
from paramsql.filler import as_debug_sql, count_placeholders, normalize_sql
from paramsql.parameter import Parameter


class TestNormalizeSQL:

    def test_multiline(self):
        sql = """
            SELECT a,
                   b
            FROM t

            WHERE a = ?
        """
        assert normalize_sql(sql) == 'SELECT a, b FROM t WHERE a = ?'

    def test_single_line_trimmed(self):
        assert normalize_sql('  SELECT 1  ') == 'SELECT 1'

    def test_windows_newlines(self):
        assert normalize_sql('SELECT 1\r\nFROM t') == 'SELECT 1 FROM t'

    def test_empty(self):
        assert normalize_sql('') == ''


class TestAsDebugSQL:

    def test_replaces_in_order(self):
        sql = 'SELECT * FROM t WHERE a = ? AND b = ? AND c = ?'
        params = [Parameter.of_int(1), Parameter.of_str('x'), Parameter.of_date(datetime.date(2024, 1, 31))]
        assert as_debug_sql(sql, params) == "SELECT * FROM t WHERE a = 1 AND b = 'x' AND c = '2024-01-31'"

    def test_null(self):
        assert as_debug_sql('a = ?', [Parameter.of_str(None)]) == 'a = NULL'

    def test_normalizes(self):
        assert as_debug_sql('SELECT a\n  FROM t\n WHERE a = ?\n', [Parameter.of_int(5)]) == \
            'SELECT a FROM t WHERE a = 5'

    def test_no_placeholders(self):
        assert as_debug_sql('SELECT 1', []) == 'SELECT 1'

    def test_value_containing_marker(self):
        assert as_debug_sql('a = ? AND b = ?', [Parameter.of_str('?'), Parameter.of_int(2)]) == \
            "a = '?' AND b = 2"

    def test_none_sql(self):
        assert as_debug_sql(None, []) is None

    @pytest.mark.parametrize(('sql', 'count'), [
        ('a = ? AND b = ?', 1),
        ('a = ?', 2),
        ('a = 1', 1),
        ('a = ?', 0),
    ], ids=['too-few', 'too-many', 'none-expected', 'none-given'])
    def test_count_mismatch(self, sql, count):
        with pytest.raises(ParameterCountError):
            as_debug_sql(sql, [Parameter.of_int(1)] * count)

    def test_count_mismatch_is_validation_error(self):
        with pytest.raises(ValidationError):
            as_debug_sql('a = ?', [])

    def test_marker_in_literal_counts(self):
        assert count_placeholders("SELECT '?' FROM t WHERE a = ?") == 2
        with pytest.raises(ParameterCountError):
            as_debug_sql("SELECT '?' FROM t WHERE a = ?", [Parameter.of_int(1)])


if __name__ == '__main__':
    pytest.main([__file__])
