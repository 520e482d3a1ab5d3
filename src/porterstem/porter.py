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
Implementation of the
`Porter stemming algorithm <http://tartarus.org/~martin/PorterStemmer/>`_
in Python.

This follows the algorithm as published in 1980, with the two departures
used by the reference ANSI C version: "-bli" maps to "-ble" in step 2 (in
addition to the original "-abli"), and "-logi" maps to "-log". There is no
irregular-word list; every word goes through the same rules.

>>> stem("caresses")
'caress'
>>> stem("Relational")
'relat'
"""

import re
from typing import Callable, Optional

from porterstem.regions import double_consonant, ends_cvc, measure, \
    vowel_in_stem
from porterstem.rules import DERIVATIONAL_RULES, PLURAL_RULES, \
    RESIDUAL_RULES, SECONDARY_RULES


# Type aliases

Tracer = Callable[[str, str, str], None]


# Words shorter than this are returned without stemming
MIN_LENGTH = 3

_nonletters = re.compile("[^A-Za-z]+")


def normalize(word: str) -> str:
    """Removes everything except ASCII letters from the word and lowercases
    it.

    >>> normalize("Run-ning!")
    'running'
    """

    return _nonletters.sub("", word).lower()


# Steps

def step_1a(word: str) -> str:
    # caresses -> caress, ponies -> poni, caress -> caress, cats -> cat
    return PLURAL_RULES.apply(word)


def step_1b(word: str) -> str:
    if word.endswith("eed"):
        # A word ending in -eed never falls through to the -ed rule, so
        # "feed" stays "feed"
        if measure(word[:-3]) > 0:
            return word[:-1]
        return word

    if word.endswith("ed"):
        stem = word[:-2]
    elif word.endswith("ing"):
        stem = word[:-3]
    else:
        return word

    if not vowel_in_stem(stem):
        return word
    return _step_1b_cleanup(stem)


def _step_1b_cleanup(word: str) -> str:
    # Repairs the stem after removing -ed or -ing
    if word.endswith(("at", "bl", "iz")):
        # conflat(ed) -> conflate, troubl(ed) -> trouble
        return word + "e"
    elif double_consonant(word):
        # hopp(ing) -> hop, but fall(ing) -> fall
        if word[-1] not in "lsz":
            return word[:-1]
        return word
    elif measure(word) == 1 and ends_cvc(word):
        # fil(ing) -> file
        return word + "e"
    return word


def step_1c(word: str) -> str:
    # happy -> happi, sky -> sky
    if word.endswith("y") and vowel_in_stem(word[:-1]):
        return word[:-1] + "i"
    return word


def step_2(word: str) -> str:
    return DERIVATIONAL_RULES.apply(word)


def step_3(word: str) -> str:
    return SECONDARY_RULES.apply(word)


def step_4(word: str) -> str:
    return RESIDUAL_RULES.apply(word)


def step_5a(word: str) -> str:
    if not word.endswith("e"):
        return word

    stem = word[:-1]
    m = measure(stem)
    # probate -> probat, cease -> ceas, but rate -> rate
    if m > 1 or (m == 1 and not ends_cvc(stem)):
        return stem
    return word


def step_5b(word: str) -> str:
    # controll -> control, but roll -> roll
    if word.endswith("ll") and measure(word) > 1:
        return word[:-1]
    return word


# The phases after normalization, in the order they run
PHASES = (
    ("step_1a", step_1a),
    ("step_1b", step_1b),
    ("step_1c", step_1c),
    ("step_2", step_2),
    ("step_3", step_3),
    ("step_4", step_4),
    ("step_5a", step_5a),
    ("step_5b", step_5b),
)


def stem(word: str, tracer: Optional[Tracer]=None) -> str:
    """
    Returns the Porter stem of the given word. The word is normalized first
    (see :func:`normalize`), so the result is always lowercase ASCII. Words
    shorter than three letters after normalization are returned as they are.

    :param word: the word to stem.
    :param tracer: an optional function called as
        ``tracer(phase_name, before, after)`` after each phase. See
        :mod:`porterstem.tracing`.
    """

    if not isinstance(word, str):
        raise TypeError("Can't stem %r, expected a str" % (word,))

    original = word
    word = normalize(word)
    if tracer is not None:
        tracer("normalize", original, word)
    if len(word) < MIN_LENGTH:
        return word

    for name, fn in PHASES:
        before = word
        word = fn(word)
        if tracer is not None:
            tracer(name, before, word)
    return word
