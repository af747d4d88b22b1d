"""Property-based tests for valuematch matchers."""

from hypothesis import assume, given
from hypothesis import strategies as st

from valuematch import (
    Err,
    InvalidType,
    InvalidValue,
    Ok,
    any_,
    eq,
    to_validator,
    type_id,
    values_equal,
)

primitives = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=10),
)

json_values = st.recursive(
    primitives,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=5), children, max_size=4),
    ),
    max_leaves=12,
)

# Pairs of values sharing a type id
same_type_pairs = st.one_of(
    st.tuples(st.booleans(), st.booleans()),
    st.tuples(st.integers(-1000, 1000), st.integers(-1000, 1000)),
    st.tuples(st.text(max_size=10), st.text(max_size=10)),
    st.tuples(st.lists(primitives, max_size=3), st.lists(primitives, max_size=3)),
    st.tuples(
        st.dictionaries(st.text(max_size=3), primitives, max_size=3),
        st.dictionaries(st.text(max_size=3), primitives, max_size=3),
    ),
)


class TestPropertyBasedMatchers:
    """Property-based tests for the primitive matchers."""

    @given(json_values)
    def test_any_accepts_all(self, value):
        assert any_().validate(value) == Ok(None)

    @given(json_values)
    def test_eq_reflexive(self, value):
        assert eq(value).validate(value) == Ok(None)

    @given(json_values, json_values)
    def test_eq_type_precedence(self, expected, actual):
        assume(type_id(expected) is not type_id(actual))

        result = eq(expected).validate(actual)
        assert result == Err(InvalidType(actual, type_id(expected)))
        assert result.error.value is actual

    @given(same_type_pairs)
    def test_eq_value_mismatch(self, pair):
        expected, actual = pair
        assume(not values_equal(expected, actual))

        result = eq(expected).validate(actual)
        assert result == Err(InvalidValue(actual, repr(expected)))

    @given(primitives, json_values)
    def test_literal_lifting_equivalence(self, literal, value):
        assert to_validator(literal).validate(value) == eq(literal).validate(value)

    @given(json_values)
    def test_lifted_structure_matches_itself(self, value):
        assert to_validator(value).validate(value) == Ok(None)
