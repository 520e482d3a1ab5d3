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
Letter classification predicates for the Porter stemming algorithm.

A letter is a vowel if it is one of ``a``, ``e``, ``i``, ``o`` or ``u``. The
letter ``y`` depends on its context: it is a consonant at the start of a word
and after a vowel, and a vowel after a consonant. So in "toy" the ``y`` is a
consonant, while in "syzygy" every ``y`` is a vowel.

Any word can be written in the form ``[C](VC){m}[V]``, where ``C`` is a run
of consonants and ``V`` is a run of vowels. The number ``m`` is the word's
*measure*, and most of the stemming rules are conditioned on it::

    tr, ee, tree, y, by                     m=0
    trouble, oats, trees, ivy               m=1
    troubles, private, oaten, orrery        m=2
"""

vowels = frozenset("aeiou")


def consonant(word: str, i: int) -> bool:
    """Returns True if the letter at index ``i`` of ``word`` acts as a
    consonant.
    """

    ch = word[i]
    if ch in vowels:
        return False
    if ch != "y":
        return True

    # Find the start of the run of y's ending at i. The first y of the run is
    # a consonant at the start of the word or after a vowel, and the
    # classification alternates from there.
    j = i
    while j > 0 and word[j - 1] == "y":
        j -= 1
    first = j == 0 or word[j - 1] in vowels
    if (i - j) % 2:
        return not first
    return first


def vowel(word: str, i: int) -> bool:
    return not consonant(word, i)


def cv_pattern(word: str) -> str:
    """Returns a string the same length as ``word`` with ``"c"`` for each
    consonant and ``"v"`` for each vowel.

    >>> cv_pattern("toy")
    'cvc'
    >>> cv_pattern("syzygy")
    'cvcvcv'
    """

    out = []
    prev_vowel = False
    for i, ch in enumerate(word):
        if ch in vowels:
            isvowel = True
        elif ch == "y":
            isvowel = i > 0 and not prev_vowel
        else:
            isvowel = False
        out.append("v" if isvowel else "c")
        prev_vowel = isvowel
    return "".join(out)


def vowel_in_stem(stem: str) -> bool:
    """Returns True if any letter of ``stem`` is a vowel."""

    return "v" in cv_pattern(stem)


def measure(stem: str) -> int:
    """Returns the measure ``m`` of ``stem``, the number of vowel runs that
    are followed by a consonant run::

        <c><v>       gives 0
        <c>vc<v>     gives 1
        <c>vcvc<v>   gives 2
        <c>vcvcvc<v> gives 3

    An empty stem has a measure of 0.
    """

    n = 0
    prev = "c"
    for cls in cv_pattern(stem):
        if cls == "c" and prev == "v":
            n += 1
        prev = cls
    return n


def double_consonant(word: str) -> bool:
    """Returns True if ``word`` ends with two identical consonants."""

    if len(word) < 2:
        return False
    if word[-1] != word[-2]:
        return False
    return consonant(word, len(word) - 1)


def ends_cvc(word: str) -> bool:
    """Returns True if ``word`` ends consonant-vowel-consonant and the final
    consonant is not ``w``, ``x`` or ``y``.

    This is used to restore an ``e`` on words such as "hop(e)" and "fil(e)"
    but not "fail", "snow" or "box".
    """

    if len(word) < 3:
        return False
    if word[-1] in "wxy":
        return False
    return cv_pattern(word).endswith("cvc")
