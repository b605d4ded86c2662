import pytest

from tetrio.api.errors import InvalidArgumentError
from tetrio.api.params import record, record_leaderboard, user_leaderboard
from tetrio.api.params.pagination import After, Before, format_key, validate_limit


def test_bound_renders_keys_as_query_param():
    assert After([500000.0, 0.0, 0.0]).to_query_param() == ("after", "500000:0:0")
    assert Before([24998.3, 1.5, 0.25]).to_query_param() == ("before", "24998.3:1.5:0.25")


def test_bound_keys_round_trip_through_array():
    keys = [10000.5, 0.0, 1722340800000.0]
    assert After(keys).to_array() == keys
    assert Before(keys).to_array() == keys


def test_bound_requires_three_keys():
    with pytest.raises(InvalidArgumentError):
        After([1.0, 2.0])
    with pytest.raises(InvalidArgumentError):
        Before([1.0, 2.0, 3.0, 4.0])
    with pytest.raises(InvalidArgumentError):
        After("abc")


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0"),
        (-3.0, "-3"),
        (1e20, "100000000000000000000"),
        (0.1, "0.1"),
        (1e-07, "0.0000001"),
    ],
)
def test_format_key(value, expected):
    assert format_key(value) == expected


def test_setters_return_new_criteria():
    base = user_leaderboard.SearchCriteria()
    limited = base.limit(50)

    assert base.entry_limit is None
    assert limited.entry_limit == 50
    assert base.build() == []


def test_last_bound_wins():
    criteria = record.SearchCriteria().after([1, 2, 3]).before([4, 5, 6])
    assert isinstance(criteria.bound, Before)
    assert criteria.build() == [("before", "4:5:6")]


def test_build_order_is_bound_limit_then_filters():
    criteria = user_leaderboard.SearchCriteria().country("jp").limit(10).after([500000.0, 0.0, 0.0])
    assert criteria.build() == [
        ("after", "500000:0:0"),
        ("limit", "10"),
        ("country", "JP"),
    ]


def test_init_resets_in_place():
    criteria = user_leaderboard.SearchCriteria().country("us").limit(25).before([1, 1, 1])
    criteria.init()

    assert criteria == user_leaderboard.SearchCriteria()
    assert criteria.build() == []


@pytest.mark.parametrize(
    "criteria_cls, lowest, highest",
    [
        (user_leaderboard.SearchCriteria, 0, 100),
        (record.SearchCriteria, 1, 100),
        (record_leaderboard.SearchCriteria, 1, 100),
    ],
)
def test_limit_boundaries(criteria_cls, lowest, highest):
    assert criteria_cls().limit(lowest).entry_limit == lowest
    assert criteria_cls().limit(highest).entry_limit == highest

    with pytest.raises(InvalidArgumentError):
        criteria_cls().limit(lowest - 1)
    with pytest.raises(InvalidArgumentError):
        criteria_cls().limit(highest + 1)


def test_user_leaderboard_limit_zero_is_sent():
    assert user_leaderboard.SearchCriteria().limit(0).build() == [("limit", "0")]


def test_limit_rejects_non_integers():
    with pytest.raises(InvalidArgumentError):
        record.SearchCriteria().limit(True)
    with pytest.raises(InvalidArgumentError):
        record.SearchCriteria().limit(10.0)


def test_validate_limit_catches_assigned_values():
    criteria = record.SearchCriteria()
    criteria.entry_limit = 0

    with pytest.raises(InvalidArgumentError, match="between 1 and 100"):
        criteria.validate_limit()


def test_validate_limit_helper():
    assert validate_limit(1) == 1
    assert validate_limit(100) == 100
    with pytest.raises(InvalidArgumentError):
        validate_limit(101)
    with pytest.raises(ValueError):
        validate_limit(0)
