from ._closest_match import closest_match
from ._exceptions import InvalidSequenceError, NoCloseMatchError
from ._levenshtein import levenshtein, normalized_levenshtein
