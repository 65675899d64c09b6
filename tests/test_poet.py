import pytest

from graphpoet.poet import GraphPoet
from graphpoet.representations import empty, representations

# Testing strategy
#   empty corpus, one-word corpus
#   same word in different cases, repeated words
#   weights higher than 1, competing bridges
#   bridges spanning corpus lines
#   no bridge possible, whitespace in the input

@pytest.fixture(params=list(representations))
def kind(request):
    return request.param

def test_mugar(kind):
    poet = GraphPoet.from_lines(
        ["This is a test of the Mugar Omni Theater sound system."], kind
    )
    assert poet.poem("Test the system.") == "Test of the system."

def test_empty_corpus(kind):
    poet = GraphPoet.from_lines([], kind)
    text = "Nothing should be changed."
    assert poet.poem(text) == text

def test_one_word_corpus(kind):
    poet = GraphPoet.from_lines(["test"], kind)
    text = "This is a test for one."
    assert poet.poem(text) == text

def test_cases(kind):
    poet = GraphPoet.from_lines(["WORDS That ARE words"], kind)
    assert poet.poem("Words are words") == "Words that are words"

def test_repeat(kind):
    poet = GraphPoet.from_lines(["repeat Repeat REPEAT"], kind)
    assert poet.poem("Repeat repeat") == "Repeat repeat repeat"

def test_higher_weight_wins(kind):
    corpus = ["one good line", "one bad line", "one good line"]
    poet = GraphPoet.from_lines(corpus, kind)
    assert poet.bridge("One", "line") == "good"
    assert poet.poem("One line") == "One good line"

def test_summed_weight_wins(kind):
    # a -> x (3) -> b (1) beats a -> y (1) -> b (2)
    g = empty(kind)
    g.set("a", "x", 3)
    g.set("x", "b", 1)
    g.set("a", "y", 1)
    g.set("y", "b", 2)
    assert GraphPoet(g).bridge("A", "B") == "x"

def test_bridge_across_lines(kind):
    poet = GraphPoet.from_lines(["the first", "and second"], kind)
    assert poet.poem("The first second") == "The first and second"

def test_no_bridge(kind):
    poet = GraphPoet.from_lines(["alpha beta gamma"], kind)
    assert poet.bridge("gamma", "alpha") is None
    words = poet.poem_words("gamma beta alpha")
    assert words == ["gamma", "beta", "alpha"]

def test_bridges_are_lowercase_and_input_case_kept(kind):
    poet = GraphPoet.from_lines(["Red GREEN Blue"], kind)
    assert poet.poem("RED blue") == "RED green blue"

def test_input_whitespace_is_normalized(kind):
    poet = GraphPoet.from_lines([], kind)
    assert poet.poem("  spaced \t out\n") == "spaced out"
    assert poet.poem("") == ""

def test_ties_are_deterministic(kind):
    poet = GraphPoet.from_lines(["go left home go right home"], kind)
    first = poet.poem("go home")
    assert first in ("go left home", "go right home")
    assert poet.poem("go home") == first

def test_graph_is_not_modified():
    poet = GraphPoet.from_lines(["a b c"])
    poet.poem("a c")
    poet.graph.set("c", "a", 1)
    with pytest.raises(AssertionError, match="edges changed"):
        poet.check_rep()

def test_from_file(write_corpus):
    poet = GraphPoet.from_file(write_corpus("a test of\nthe system"))
    assert poet.poem("test the") == "test of the"
    assert "test -> of (1)" in str(poet)
