from porterstem.regions import consonant, cv_pattern, double_consonant, \
    ends_cvc, measure, vowel, vowel_in_stem


def test_consonant():
    assert consonant("toy", 0)
    assert not consonant("toy", 1)
    # y after a vowel is a consonant
    assert consonant("toy", 2)
    # y at the start of a word is a consonant
    assert consonant("yes", 0)
    # y after a consonant is a vowel
    assert not consonant("syzygy", 1)
    assert not consonant("syzygy", 5)


def test_y_runs():
    # The first y follows a vowel, so it is a consonant, which makes the
    # second y a vowel
    assert consonant("sayy", 2)
    assert not consonant("sayy", 3)
    assert cv_pattern("sayy") == "cvcv"
    assert cv_pattern("yyy") == "cvc"


def test_vowel():
    for word in ("toy", "syzygy", "sayy", "queueing"):
        for i in range(len(word)):
            assert vowel(word, i) == (not consonant(word, i))


def test_cv_pattern_matches_consonant():
    for word in ("crying", "yummy", "players", "byway", "yyyyyy"):
        pattern = cv_pattern(word)
        assert len(pattern) == len(word)
        for i, cls in enumerate(pattern):
            assert consonant(word, i) == (cls == "c")


def test_vowel_in_stem():
    assert vowel_in_stem("happ")
    assert vowel_in_stem("by")
    assert not vowel_in_stem("tr")
    assert not vowel_in_stem("sk")
    assert not vowel_in_stem("y")
    assert not vowel_in_stem("")


def test_measure():
    for word in ("", "tr", "ee", "tree", "y", "by"):
        assert measure(word) == 0, word
    for word in ("trouble", "oats", "trees", "ivy"):
        assert measure(word) == 1, word
    for word in ("troubles", "private", "oaten", "orrery"):
        assert measure(word) == 2, word
    assert measure("generalization") == 6


def test_double_consonant():
    assert double_consonant("hopp")
    assert double_consonant("fall")
    assert not double_consonant("tree")
    assert not double_consonant("hop")
    assert not double_consonant("a")
    assert not double_consonant("")
    # The second y is a vowel
    assert not double_consonant("sayy")


def test_ends_cvc():
    assert ends_cvc("hop")
    assert ends_cvc("fil")
    assert ends_cvc("conflat")
    assert not ends_cvc("fail")
    assert not ends_cvc("snow")
    assert not ends_cvc("box")
    assert not ends_cvc("tray")
    assert not ends_cvc("ab")
    assert not ends_cvc("")
