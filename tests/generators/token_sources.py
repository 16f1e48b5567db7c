import hypothesis.strategies as st

words = st.text(
    alphabet=st.characters(categories=("Lu", "Ll")), min_size=1, max_size=8
)

ascii_words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)

numbers = st.integers(min_value=0, max_value=10**6).map(str)

whitespace = st.text(alphabet=" \n\t\r", min_size=1, max_size=4)


@st.composite
def token_sources(draw, pieces=st.one_of(words, numbers, whitespace), max_size=20):
    """
    Text built from words, numbers and whitespace, which is tokenizable by
    the lexer in tests.test_properties.
    """
    return "".join(draw(st.lists(pieces, max_size=max_size)))


ascii_token_sources = token_sources(pieces=st.one_of(ascii_words, numbers, whitespace))
