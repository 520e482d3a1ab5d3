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

import functools
import threading
from collections import Counter
from heapq import nsmallest
from operator import itemgetter


def unbound_cache(func):
    """Caching decorator with an unbounded cache size.

    Like :func:`lfu_cache`, the wrapper has ``cache_info()`` and
    ``cache_clear()`` methods and is safe to call from several threads. The
    ``maxsize`` reported by ``cache_info()`` is None.
    """

    stats = [0, 0]  # Hits, misses
    cache = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def caching_wrapper(*args):
        with lock:
            try:
                result = cache[args]
                stats[0] += 1
                return result
            except KeyError:
                stats[1] += 1

        result = func(*args)
        with lock:
            cache[args] = result
        return result

    def cache_info():
        with lock:
            return stats[0], stats[1], None, len(cache)

    def cache_clear():
        with lock:
            cache.clear()
            stats[0] = stats[1] = 0

    caching_wrapper.cache_info = cache_info
    caching_wrapper.cache_clear = cache_clear
    return caching_wrapper


def lfu_cache(maxsize=100):
    """A simple cache that, when the cache is full, deletes the least
    frequently used 10% of the cached values.

    This follows the protocol of the ``functools.lru_cache`` decorator in the
    standard library: view the cache statistics tuple
    ``(hits, misses, maxsize, currsize)`` with ``f.cache_info()``, clear the
    cache and statistics with ``f.cache_clear()``, and access the underlying
    function with ``f.__wrapped__``.

    The cache is guarded by a lock, so the wrapper may be called from several
    threads at once. The wrapped function itself runs outside the lock.

    Arguments to the cached function must be hashable.
    """

    def decorating_function(user_function):
        stats = [0, 0]  # Hits, misses
        data = {}
        # Only keys present in data have a use count
        usecount = Counter()
        lock = threading.Lock()

        @functools.wraps(user_function)
        def wrapper(*args):
            with lock:
                if args in data:
                    stats[0] += 1  # Hit
                    usecount[args] += 1
                    return data[args]
                stats[1] += 1  # Miss

            result = user_function(*args)

            with lock:
                if args not in data:
                    if len(data) >= maxsize:
                        for k, _ in nsmallest(maxsize // 10 or 1,
                                              usecount.items(),
                                              key=itemgetter(1)):
                            del data[k]
                            del usecount[k]
                    data[args] = result
                usecount[args] += 1
            return result

        def cache_info():
            with lock:
                return stats[0], stats[1], maxsize, len(data)

        def cache_clear():
            with lock:
                data.clear()
                usecount.clear()
                stats[0] = stats[1] = 0

        wrapper.cache_info = cache_info
        wrapper.cache_clear = cache_clear
        return wrapper
    return decorating_function
