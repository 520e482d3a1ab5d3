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

import logging
from concurrent import futures
from typing import Callable, Iterable, Iterator, Optional

from porterstem.porter import Tracer, normalize, stem
from porterstem.util.cache import lfu_cache, unbound_cache


logger = logging.getLogger(__name__)


# Type aliases

StemFunction = Callable[..., str]


class Stemmer:
    """
    Stems words using the Porter stemming algorithm, with optional caching,
    a list of words to leave alone, and an optional tracer.

    >>> stemmer = Stemmer()
    >>> [stemmer(w) for w in ("fundamentally", "willows")]
    ['fundament', 'willow']

    You can pass your own stemming function to the Stemmer. It must accept a
    single word and a ``tracer`` keyword argument::

        stemmer = Stemmer(stemfn=my_stem_function)

    By default, this class wraps a cache around the stemming function. The
    ``cachesize`` keyword argument sets the size of the cache. To make the
    cache unbounded (the class caches every input), use ``cachesize=-1``. To
    disable caching, use ``cachesize=None``.
    """

    def __init__(self, stemfn: StemFunction=stem, ignore: Iterable[str]=None,
                 cachesize: Optional[int]=50000, tracer: Tracer=None):
        """
        :param stemfn: the function to use for stemming.
        :param ignore: a set/list of words that should not be stemmed. The
            words are normalized and converted into a frozenset. If you omit
            this argument, all words are stemmed.
        :param cachesize: the maximum number of words to cache. Use ``-1`` for
            an unbounded cache, or ``None`` for no caching.
        :param tracer: a function called as ``tracer(phase, before, after)``
            for each phase of each word stemmed. Words are not looked up in
            the cache while a tracer is set, so every word is traced.
        """

        self.stemfn = stemfn
        self.ignore = frozenset() if ignore is None else frozenset(
            normalize(w) for w in ignore
        )
        self.cachesize = cachesize
        self.tracer = tracer
        # clear() sets the _stem attr to a cached wrapper around self.stemfn
        self.clear()

    def __repr__(self):
        return "%s(stemfn=%r, cachesize=%r)" % (type(self).__name__,
                                                self.stemfn, self.cachesize)

    def __getstate__(self):
        # Can't pickle a dynamic function, so we have to remove the _stem
        # attribute from the state
        return dict((k, v) for k, v in self.__dict__.items() if k != "_stem")

    def __setstate__(self, state):
        self.__dict__.update(state)
        # Set the _stem attribute
        self.clear()

    def __eq__(self, other):
        return (other is not None and self.__class__ is other.__class__
                and self.stemfn == other.stemfn
                and self.ignore == other.ignore)

    def __hash__(self):
        return hash((self.__class__, self.stemfn, self.ignore))

    def clear(self):
        """Empties the word cache."""

        size = self.cachesize
        if size is not None and size < 0:
            self._stem = unbound_cache(self.stemfn)
        elif size is not None and size > 1:
            self._stem = lfu_cache(size)(self.stemfn)
        else:
            self._stem = self.stemfn

    def cache_info(self):
        """Returns a ``(hits, misses, maxsize, currsize)`` tuple, or None if
        caching is disabled.
        """

        if self._stem is self.stemfn:
            return None
        return self._stem.cache_info()

    def stem(self, word: str) -> str:
        """Returns the stem of the given word."""

        if not isinstance(word, str):
            raise TypeError("Can't stem %r, expected a str" % (word,))

        if self.ignore:
            normed = normalize(word)
            if normed in self.ignore:
                return normed

        if self.tracer is not None:
            return self.stemfn(word, tracer=self.tracer)
        return self._stem(word)

    __call__ = stem

    def stem_words(self, words: Iterable[str]) -> Iterator[str]:
        """Yields the stem of each word in the given iterable."""

        stemfn = self.stem
        for word in words:
            yield stemfn(word)

    async def stem_async(self, word: str) -> str:
        """Coroutine version of :meth:`stem`. The result is the same as
        calling :meth:`stem` directly.
        """

        return self.stem(word)

    def submit(self, executor: futures.Executor, word: str) -> futures.Future:
        """Schedules stemming the word on the given executor and returns a
        ``concurrent.futures.Future`` for the stem.

        The type of the word is checked before submitting, so a non-string
        raises ``TypeError`` here rather than from the future.
        """

        if not isinstance(word, str):
            raise TypeError("Can't stem %r, expected a str" % (word,))
        logger.debug("Submitting %r to %r", word, executor)
        return executor.submit(self.stem, word)


async def stem_async(word: str, tracer: Tracer=None) -> str:
    """Coroutine version of :func:`porterstem.porter.stem`."""

    return stem(word, tracer=tracer)
