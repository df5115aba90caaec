from learning import parse


def test_parse_parenthesised_negative():
    assert parse("(-2) + 3") == [-2, 3]


def test_parse_no_numbers():
    assert parse("abc") == []
    assert parse("") == []
    assert parse("+ - ( )") == []


def test_minus_binds_to_following_digits_only():
    assert parse("12-3") == [12, -3]
    assert parse("1-2-3") == [1, -2, -3]


def test_parse_ignores_separators_and_keeps_order():
    assert parse("-2 + 5 + (-3)") == [-2, 5, -3]
    assert parse("x7y-08z") == [7, -8]


def test_parse_large_values_are_not_clamped():
    assert parse("150 + (-999)") == [150, -999]
