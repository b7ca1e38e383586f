from .edit_distance import closest_match, levenshtein, normalized_levenshtein
from .value_set import ValueSet

__version__ = "0.1.0"
