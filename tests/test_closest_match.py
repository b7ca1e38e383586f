import pytest
from returns.result import Failure, Success

from scriptutils import closest_match
from scriptutils.edit_distance import InvalidSequenceError, NoCloseMatchError

commands = ["print", "pairs", "ipairs", "require", "select"]


def test_closest_match():
    actual = closest_match("pirnt", commands)

    assert actual == Success("print")


def test_closest_match_exact():
    assert closest_match("select", commands).unwrap() == "select"


def test_closest_match_tie_goes_to_first():
    assert closest_match("ab", ["xb", "ax", "ab_"]).unwrap() == "xb"


def test_closest_match_within_max_distance():
    assert closest_match("requier", commands, max_distance=2).unwrap() == "require"


def test_closest_match_beyond_max_distance():
    actual = closest_match("tostring", commands, max_distance=2)

    assert isinstance(actual, Failure)
    assert actual.failure() == NoCloseMatchError("tostring", 2, len(commands))


def test_closest_match_no_candidates():
    match closest_match("print", []):
        case Failure(NoCloseMatchError(target="print", max_distance=None, candidate_count=0)):
            pass
        case _:
            raise AssertionError("Expected a failure for no candidates")


def test_closest_match_token_sequences():
    actual = closest_match([1, 2, 3], iter([[1, 2], [4, 5, 6], (1, 2, 3, 4)]))

    assert actual.unwrap() == [1, 2]


def test_closest_match_rejects_negative_max_distance():
    with pytest.raises(ValueError):
        closest_match("print", commands, max_distance=-1)


def test_no_close_match_error_message():
    assert "None of the 5 candidates is within an edit distance of 2" in str(
        NoCloseMatchError("x", 2, 5)
    )
    assert "no candidates" in str(NoCloseMatchError("x", None, 0))
    assert "no candidates" in str(NoCloseMatchError("x", 2, 0))


def test_closest_match_no_candidates_with_max_distance():
    actual = closest_match("print", [], max_distance=2)

    assert actual.failure() == NoCloseMatchError("print", 2, 0)
    assert "no candidates" in str(actual.failure())


@pytest.mark.parametrize("target", [123, None, iter("print")])
def test_closest_match_rejects_non_sequence_target(target):
    with pytest.raises(InvalidSequenceError):
        closest_match(target, [])

    with pytest.raises(InvalidSequenceError):
        closest_match(target, commands)
