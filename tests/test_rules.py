import pytest

from porterstem.rules import DERIVATIONAL_RULES, PLURAL_RULES, \
    RESIDUAL_RULES, SECONDARY_RULES, SuffixRule, SuffixTable, m_gt_0


def test_longest_match():
    rule, stem = DERIVATIONAL_RULES.match("relational")
    assert rule.suffix == "ational"
    assert stem == "rel"

    rule, stem = PLURAL_RULES.match("caresses")
    assert rule.suffix == "sses"

    rule, stem = RESIDUAL_RULES.match("replacement")
    assert rule.suffix == "ement"
    assert stem == "replac"


def test_no_match():
    assert DERIVATIONAL_RULES.match("tree") is None
    assert SECONDARY_RULES.apply("tree") == "tree"


def test_guard_blocks_shorter_suffix():
    # -ational matches but its stem fails the guard, and -tional is not
    # tried instead
    assert DERIVATIONAL_RULES.apply("rational") == "rational"
    assert DERIVATIONAL_RULES.apply("relational") == "relate"
    assert DERIVATIONAL_RULES.apply("conditional") == "condition"


def test_plural_rules():
    assert PLURAL_RULES.apply("caresses") == "caress"
    assert PLURAL_RULES.apply("ponies") == "poni"
    assert PLURAL_RULES.apply("caress") == "caress"
    assert PLURAL_RULES.apply("cats") == "cat"
    assert PLURAL_RULES.apply("cat") == "cat"


def test_ion_condition():
    rule, stem = RESIDUAL_RULES.match("adoption")
    assert rule.suffix == "ion"
    assert stem == "adopt"
    assert RESIDUAL_RULES.match("onion") is None
    assert RESIDUAL_RULES.apply("adoption") == "adopt"


def test_empty_stem():
    # The whole word is a suffix; an empty stem has measure 0
    assert RESIDUAL_RULES.apply("ement") == "ement"
    assert PLURAL_RULES.apply("ies") == "i"


def test_table_contents():
    assert len(PLURAL_RULES) == 4
    assert "ator" in DERIVATIONAL_RULES
    assert "logi" in DERIVATIONAL_RULES
    assert "ion" in RESIDUAL_RULES
    assert "ness" not in RESIDUAL_RULES
    assert [r.suffix for r in SECONDARY_RULES] == [
        "icate", "ative", "alize", "iciti", "ical", "ful", "ness"
    ]


def test_construction():
    table = SuffixTable("test", [("ness", ""), SuffixRule("ful", "")],
                        guard=m_gt_0)
    assert all(isinstance(rule, SuffixRule) for rule in table)
    assert table.apply("goodness") == "good"
    assert table.apply("hopeful") == "hope"
    assert "test" in repr(table)


def test_duplicate_suffix():
    with pytest.raises(ValueError):
        SuffixTable("dup", [("ness", ""), ("ness", "n")])


def test_empty_suffix():
    with pytest.raises(ValueError):
        SuffixTable("empty", [("", "e")])
