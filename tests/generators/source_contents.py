import hypothesis.strategies as st

whitespace = st.text(alphabet=" \t", min_size=1, max_size=3)

numbers = st.text(alphabet="0123456789", min_size=1, max_size=5)
identifiers = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=5)
symbols = st.sampled_from(["+", "☃", "€", "𝄞"])

words = st.one_of(numbers, identifiers, symbols)

# Text made only of words and whitespace known to the tokenizer
# used in tests/test_tokenizer.py.
sources = st.lists(st.tuples(words, st.one_of(st.just(""), whitespace))).map(
    lambda pairs: "".join(word + space for word, space in pairs)
)

multilingual_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs",)), max_size=50
)
