import hypothesis.strategies as st

from scriptutils import ValueSet
from scriptutils.value_set import strict_equality, value_equality

# Lists are unhashable, which exercises the scanning path of membership
items = st.one_of(
    st.integers(min_value=-4, max_value=4),
    st.text(alphabet="ab", max_size=2),
    st.lists(st.integers(min_value=0, max_value=2), max_size=2),
)

value_sets = st.builds(ValueSet.from_iterable, st.lists(items, max_size=8))

words = st.text(alphabet="abc", max_size=8)

# Bools and floats collide with ints under == but not under strict_equality
mixed_items = st.one_of(
    st.integers(min_value=0, max_value=2),
    st.booleans(),
    st.sampled_from([0.0, 1.0, 2.0]),
    st.tuples(st.integers(min_value=0, max_value=1)),
)

equalities = st.sampled_from([value_equality, strict_equality])

mixed_value_sets = st.builds(
    ValueSet.from_iterable, st.lists(mixed_items, max_size=6), equality=equalities
)
