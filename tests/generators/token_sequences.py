import hypothesis.strategies as st

from _tokenstream.token import Token

kinds = st.integers(min_value=1, max_value=8)

lexemes = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126), min_size=1, max_size=5
)


@st.composite
def tokens(draw, kind=kinds):
    return Token(
        draw(lexemes), draw(kind), draw(st.integers(min_value=1, max_value=1000))
    )


token_sequences = st.lists(tokens(), max_size=20)

non_empty_token_sequences = st.lists(tokens(), min_size=1, max_size=20)


@st.composite
def runs(draw, kind=3):
    """
    A run of tokens of the given kind followed by a token of another kind.
    """
    run_length = draw(st.integers(min_value=0, max_value=10))
    run = [Token(draw(lexemes), kind, i + 1) for i in range(run_length)]
    other = draw(tokens(kinds.filter(lambda k: k != kind)))
    return run, other
