import pytest
from pipeline.normalize import normalize_field, normalize_record, parse_flag, safe_int


class TestNormalizeField:
    """Cleaning of raw export values."""

    def test_quoted_value_with_doubled_quotes(self):
        assert normalize_field('"quoted ""value"""') == 'quoted "value"'

    @pytest.mark.parametrize('raw', [None, '', '   ', '\t\n'])
    def test_blank_is_absent(self, raw):
        assert normalize_field(raw) is None

    def test_surrounding_whitespace_trimmed(self):
        assert normalize_field('  Assigned  ') == 'Assigned'

    def test_whitespace_inside_quotes_trimmed(self):
        assert normalize_field('"  INC0001 "') == 'INC0001'

    def test_empty_quotes_are_absent(self):
        assert normalize_field('""') is None
        assert normalize_field('"   "') is None

    def test_single_quote_char_kept(self):
        assert normalize_field('"') == '"'

    def test_only_one_layer_of_quotes_stripped(self):
        # the inner doubled pair collapses into a single quote
        assert normalize_field('""abc""') == '"abc"'

    def test_inner_doubled_quotes_unescaped(self):
        assert normalize_field('Printer ""jam"" on floor 3') == 'Printer "jam" on floor 3'

    @pytest.mark.parametrize('raw', [
        'plain',
        '  padded  ',
        '"quoted"',
        'IT Support Team A',
        '08/18/2025, 07:11:50 PM',
    ])
    def test_idempotent_on_ordinary_values(self, raw):
        once = normalize_field(raw)
        assert normalize_field(once) == once, "Normalizing twice should change nothing"

    def test_nested_quoting_peels_one_layer_per_call(self):
        once = normalize_field('"""a"""')
        assert once == '"a"'
        assert normalize_field(once) == 'a'

    def test_non_string_values_coerced(self):
        assert normalize_field(42) == '42'


class TestNormalizeRecord:

    def test_every_value_normalized(self):
        record = normalize_record({'incident_id': ' INC1 ', 'summary': '', 'status': '"Closed"'})
        assert record == {'incident_id': 'INC1', 'summary': None, 'status': 'Closed'}

    def test_field_order_kept(self):
        record = normalize_record({'b': '1', 'a': '2', 'c': '3'})
        assert list(record) == ['b', 'a', 'c']


class TestCoercionHelpers:

    @pytest.mark.parametrize('value,expected', [
        ('3', 3),
        (' 12 ', 12),
        ('-1', -1),
        ('x', None),
        ('1.5', None),
        (None, None),
        ('2147483647', 2147483647),
        ('-2147483648', -2147483648),
        ('2147483648', None),
        ('99999999999999999999', None),
    ])
    def test_safe_int(self, value, expected):
        assert safe_int(value) == expected

    @pytest.mark.parametrize('value,expected', [
        ('Yes', True),
        ('y', True),
        ('TRUE', True),
        ('1', True),
        ('No', False),
        ('n', False),
        ('false', False),
        ('0', False),
        ('maybe', None),
        (None, None),
    ])
    def test_parse_flag(self, value, expected):
        assert parse_flag(value) is expected
