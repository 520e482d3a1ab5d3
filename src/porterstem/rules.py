# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
Static suffix tables for the Porter stemmer.

Each table is an ordered set of :class:`SuffixRule` objects. When more than
one suffix in a table matches the end of a word, the longest one is chosen,
and only then is the table's guard checked against the stem that remains. If
the guard fails the word is left alone; a shorter suffix is never tried in
its place.
"""

from typing import Callable, Iterable, NamedTuple, Optional, Tuple

from porterstem.regions import measure


# Type aliases

StemCondition = Callable[[str], bool]


class SuffixRule(NamedTuple):
    suffix: str
    replacement: str
    # Extra requirement on the stem left after removing the suffix
    condition: Optional[StemCondition] = None

    def applies_to(self, word: str) -> bool:
        if not word.endswith(self.suffix):
            return False
        if self.condition is None:
            return True
        return self.condition(word[:len(word) - len(self.suffix)])


class SuffixTable:
    """
    An immutable, ordered collection of suffix rules with a shared guard.

    >>> table = SuffixTable("example", [("ness", ""), ("ful", "")],
    ...                     guard=lambda stem: measure(stem) > 0)
    >>> table.apply("goodness")
    'good'
    """

    def __init__(self, name: str, rules: Iterable, guard: StemCondition=None):
        """
        :param name: a short name for the table, used in reprs.
        :param rules: a sequence of :class:`SuffixRule` objects or
            ``(suffix, replacement)`` tuples.
        :param guard: a function taking the stem left after removing the
            matched suffix and returning True if the replacement may be made.
            If this is None the replacement is always made.
        """

        built = []
        seen = set()
        for rule in rules:
            if not isinstance(rule, SuffixRule):
                rule = SuffixRule(*rule)
            if not rule.suffix:
                raise ValueError("Empty suffix in table %r" % name)
            if rule.suffix in seen:
                raise ValueError("Duplicate suffix %r in table %r"
                                 % (rule.suffix, name))
            seen.add(rule.suffix)
            built.append(rule)

        self.name = name
        self.guard = guard
        self._rules = tuple(built)  # type: Tuple[SuffixRule, ...]
        # Longest first, keeping definition order among equal lengths
        self._bylength = tuple(sorted(self._rules,
                                      key=lambda r: -len(r.suffix)))

    def __repr__(self):
        return "<%s %r %d rules>" % (type(self).__name__, self.name,
                                     len(self._rules))

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __contains__(self, suffix: str) -> bool:
        return any(rule.suffix == suffix for rule in self._rules)

    def match(self, word: str) -> Optional[Tuple[SuffixRule, str]]:
        """
        Returns a ``(rule, stem)`` tuple for the longest rule that applies to
        the end of the given word, where ``stem`` is the word with the rule's
        suffix removed, or None if no rule applies. The guard is not checked.
        """

        for rule in self._bylength:
            if rule.applies_to(word):
                return rule, word[:len(word) - len(rule.suffix)]
        return None

    def apply(self, word: str) -> str:
        """
        Replaces the longest matching suffix of the word if the stem passes
        the table's guard, otherwise returns the word unchanged.
        """

        found = self.match(word)
        if found is None:
            return word
        rule, stem = found
        if self.guard is not None and not self.guard(stem):
            return word
        return stem + rule.replacement


# Guards

def m_gt_0(stem: str) -> bool:
    return measure(stem) > 0


def m_gt_1(stem: str) -> bool:
    return measure(stem) > 1


def ends_s_or_t(stem: str) -> bool:
    return stem[-1:] in ("s", "t")


# Tables

# Step 1a: plurals and third person singular
PLURAL_RULES = SuffixTable("plural", [
    ("sses", "ss"),
    ("ies", "i"),
    ("ss", "ss"),
    ("s", ""),
])

# Step 2: derivational suffixes, mapped to shorter ones
DERIVATIONAL_RULES = SuffixTable("derivational", [
    ("ational", "ate"),
    ("tional", "tion"),
    ("enci", "ence"),
    ("anci", "ance"),
    ("izer", "ize"),
    ("abli", "able"),
    ("bli", "ble"),
    ("alli", "al"),
    ("entli", "ent"),
    ("eli", "e"),
    ("ousli", "ous"),
    ("ization", "ize"),
    ("ation", "ate"),
    ("ator", "ate"),
    ("alism", "al"),
    ("iveness", "ive"),
    ("fulness", "ful"),
    ("ousness", "ous"),
    ("aliti", "al"),
    ("iviti", "ive"),
    ("biliti", "ble"),
    ("logi", "log"),
], guard=m_gt_0)

# Step 3
SECONDARY_RULES = SuffixTable("secondary", [
    ("icate", "ic"),
    ("ative", ""),
    ("alize", "al"),
    ("iciti", "ic"),
    ("ical", "ic"),
    ("ful", ""),
    ("ness", ""),
], guard=m_gt_0)

# Step 4: residual suffixes, removed from stems with m > 1
RESIDUAL_RULES = SuffixTable("residual", [
    ("al", ""),
    ("ance", ""),
    ("ence", ""),
    ("er", ""),
    ("ic", ""),
    ("able", ""),
    ("ible", ""),
    ("ant", ""),
    ("ement", ""),
    ("ment", ""),
    ("ent", ""),
    SuffixRule("ion", "", ends_s_or_t),
    ("ou", ""),
    ("ism", ""),
    ("ate", ""),
    ("iti", ""),
    ("ous", ""),
    ("ive", ""),
    ("ize", ""),
], guard=m_gt_1)
