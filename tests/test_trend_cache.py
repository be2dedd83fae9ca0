from __future__ import annotations

import threading

from domain_scoring.trends import TrendCache


def test_empty_cache_misses(fake_clock):
    assert TrendCache(clock=fake_clock).get() is None


def test_refresh_then_expire(fake_clock, make_enrichment):
    cache = TrendCache(ttl_seconds=600, clock=fake_clock)
    enrichment = make_enrichment({"ai": 2.5})
    cache.refresh(enrichment)

    fake_clock.advance(599)
    assert cache.get() is enrichment

    fake_clock.advance(1)
    assert cache.get() is None


def test_clear(fake_clock, make_enrichment):
    cache = TrendCache(clock=fake_clock)
    cache.refresh(make_enrichment())
    cache.clear()
    assert cache.get() is None


def test_get_or_load_loads_once(fake_clock, make_enrichment):
    cache = TrendCache(clock=fake_clock)
    calls = []

    def loader():
        calls.append(1)
        return make_enrichment({"ai": 2.5})

    first = cache.get_or_load(loader)
    second = cache.get_or_load(loader)
    assert first is second
    assert len(calls) == 1


def test_failed_load_is_not_cached(fake_clock, make_enrichment):
    cache = TrendCache(clock=fake_clock)
    results = [None, make_enrichment()]

    assert cache.get_or_load(lambda: results.pop(0)) is None
    assert cache.get_or_load(lambda: results.pop(0)) is not None


def test_concurrent_misses_share_one_load(make_enrichment):
    cache = TrendCache()
    calls = []
    started = threading.Event()
    release = threading.Event()

    def slow_loader():
        calls.append(1)
        started.set()
        release.wait(timeout=5)
        return make_enrichment({"ai": 2.5})

    results = []
    first = threading.Thread(target=lambda: results.append(cache.get_or_load(slow_loader)))
    first.start()
    started.wait(timeout=5)

    others = [threading.Thread(target=lambda: results.append(cache.get_or_load(slow_loader))) for _ in range(4)]
    for t in others:
        t.start()
    release.set()
    for t in [first, *others]:
        t.join(timeout=5)

    assert len(calls) == 1
    assert len(results) == 5
    assert all(r is results[0] for r in results)
