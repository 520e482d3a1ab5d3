import os.path

import pytest

from porterstem import porter
from porterstem.porter import normalize, stem
from porterstem.tracing import CollectingTracer


def load_vocabulary(filename="vocabulary.txt"):
    path = os.path.join(os.path.dirname(__file__), "data", filename)
    vocab = {}
    with open(path, encoding="ascii") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            word, _, expected = line.partition("\t")
            vocab[word] = expected
    return vocab


# Canonical Porter stemmer output for a sample of the reference vocabulary
VOCABULARY = load_vocabulary()


@pytest.mark.parametrize("word,expected", sorted(VOCABULARY.items()))
def test_vocabulary(word, expected):
    assert stem(word) == expected


def test_empty():
    assert stem("") == ""
    assert stem("!!!") == ""
    assert stem("1234") == ""


def test_short_words():
    for word in ("a", "at", "IS", "a1", "b-y", "ox!"):
        assert stem(word) == normalize(word)
        assert len(stem(word)) < porter.MIN_LENGTH


def test_shortest_stemmed_word():
    # Three letters is long enough to be stemmed
    assert stem("ies") == "i"
    assert stem("its") == "it"


def test_case_insensitive():
    assert stem("RUNNING") == stem("running") == "run"
    assert stem("Caresses") == "caress"


def test_strips_nonletters():
    assert stem("run-ning!") == stem("running")
    assert stem("  ponies\n") == "poni"
    assert stem("rel4tional") == stem("reltional")


def test_non_ascii_letters_removed():
    assert normalize("cafés") == "cafs"
    assert stem("über") == "ber"


def test_never_longer():
    for word in VOCABULARY:
        assert len(stem(word)) <= len(normalize(word))


def test_long_word():
    word = "y" * 5000 + "ing"
    assert stem(word).startswith("y")
    assert stem("a" * 10000) == "a" * 10000


def test_eed_does_not_fall_through():
    # "feed" ends in -ed, but the -eed rule takes the word even though its
    # condition fails
    assert porter.step_1b("feed") == "feed"
    assert porter.step_1b("agreed") == "agree"


def test_step_1b_cleanup():
    assert porter.step_1b("conflated") == "conflate"
    assert porter.step_1b("troubling") == "trouble"
    assert porter.step_1b("sized") == "size"
    assert porter.step_1b("hopping") == "hop"
    assert porter.step_1b("falling") == "fall"
    assert porter.step_1b("hissing") == "hiss"
    assert porter.step_1b("fizzed") == "fizz"
    assert porter.step_1b("failing") == "fail"
    assert porter.step_1b("filing") == "file"
    assert porter.step_1b("snowing") == "snow"


def test_step_5():
    assert porter.step_5a("probate") == "probat"
    assert porter.step_5a("rate") == "rate"
    assert porter.step_5a("cease") == "ceas"
    assert porter.step_5b("controll") == "control"
    assert porter.step_5b("roll") == "roll"


def test_phase_order():
    names = [name for name, _ in porter.PHASES]
    assert names == ["step_1a", "step_1b", "step_1c", "step_2", "step_3",
                     "step_4", "step_5a", "step_5b"]


def test_tracer():
    tracer = CollectingTracer()
    assert stem("Relational", tracer=tracer) == "relat"
    assert [step[0] for step in tracer.steps] == (
        ["normalize"] + [name for name, _ in porter.PHASES]
    )
    assert tracer.changed() == [
        ("normalize", "Relational", "relational"),
        ("step_2", "relational", "relate"),
        ("step_5a", "relate", "relat"),
    ]


def test_tracer_short_word():
    tracer = CollectingTracer()
    assert stem("Is", tracer=tracer) == "is"
    assert tracer.steps == [("normalize", "Is", "is")]


def test_tracer_does_not_change_result():
    tracer = CollectingTracer()
    for word in VOCABULARY:
        assert stem(word, tracer=tracer) == stem(word)


def test_not_a_string():
    with pytest.raises(TypeError):
        stem(None)
    with pytest.raises(TypeError):
        stem(b"running")


def test_vocabulary_file():
    assert len(VOCABULARY) > 100
    assert VOCABULARY["caresses"] == "caress"
    assert all(word.isalpha() and word.islower() for word in VOCABULARY)
