from concurrent import futures

from porterstem.util.cache import lfu_cache, unbound_cache


def test_unbound_cache():
    calls = []

    @unbound_cache
    def double(x):
        calls.append(x)
        return x * 2

    assert double(2) == 4
    assert double(2) == 4
    assert double(3) == 6
    assert calls == [2, 3]
    assert double.cache_info() == (1, 2, None, 2)
    assert double.__name__ == "double"

    double.cache_clear()
    assert double.cache_info() == (0, 0, None, 0)
    assert double(2) == 4
    assert calls == [2, 3, 2]


def test_lfu_cache():
    calls = []

    @lfu_cache(10)
    def double(x):
        calls.append(x)
        return x * 2

    # Use 0 many times so it survives eviction
    for _ in range(5):
        assert double(0) == 0

    for i in range(1, 30):
        assert double(i) == i * 2

    hits, misses, maxsize, currsize = double.cache_info()
    assert maxsize == 10
    assert currsize <= 10
    assert hits == 4
    assert misses == 30

    calls.clear()
    assert double(0) == 0
    assert calls == []


def test_lfu_cache_exception():
    @lfu_cache(2)
    def inverse(x):
        return 1 / x

    for x in (1, 2, 3):
        inverse(x)
    try:
        inverse(0)
    except ZeroDivisionError:
        pass
    # A failed call leaves nothing behind to evict
    assert inverse(4) == 0.25
    assert inverse.cache_info()[3] <= 2


def test_lfu_cache_threads():
    @lfu_cache(10)
    def double(x):
        return x * 2

    args = list(range(500)) * 4
    with futures.ThreadPoolExecutor(8) as executor:
        results = list(executor.map(double, args))
    assert results == [x * 2 for x in args]

    hits, misses, maxsize, currsize = double.cache_info()
    assert hits + misses == len(args)
    assert currsize <= 10
