"""Tests for AddressMutator."""

import logging

from urlkv import (
    AddressMutator,
    AddressResolver,
    AddressTooLong,
    DriverOptions,
    MemoryEnvironment,
    decode,
)


def make(url=None, env=None, **kwargs):
    options = DriverOptions(url=url, **kwargs)
    resolver = AddressResolver(options.url, env)
    return resolver, AddressMutator(resolver, options)


class TestMutatorBasic:
    def test_replaces_whole_query_without_namespace(self):
        resolver, m = make("https://example.com/?old=1")
        assert m.apply({"new": "2"}) is None
        assert resolver.resolve().href == "https://example.com/?new=2"

    def test_empty_contents_clear_query(self):
        resolver, m = make("https://example.com/p?old=1#top")
        m.apply({})
        assert resolver.resolve().href == "https://example.com/p#top"

    def test_namespace_replaces_subtree_only(self):
        resolver, m = make(
            "https://example.com/?app[foo]=1&other_bar=2&app[baz]=3", base="app"
        )
        m.apply({"x": "9"})
        assert resolver.resolve().query == "app%5Bx%5D=9&other_bar=2"

    def test_dotted_namespace(self):
        resolver, m = make("https://example.com/?app[ui][a]=1&app[b]=2", base="app.ui")
        m.apply({"z": "3"})
        assert resolver.resolve().query == "app%5Bui%5D%5Bz%5D=3&app%5Bb%5D=2"

    def test_idempotent(self):
        resolver, m = make("https://example.com/?keep=1", base="ns")
        m.apply({"k": "v"})
        first = resolver.resolve().href
        m.apply({"k": "v"})
        assert resolver.resolve().href == first


class TestMutatorLengthLimit:
    def test_rejected_write_changes_nothing(self, caplog):
        resolver, m = make("https://example.com/?a=1", max_url_length=30)
        before = resolver.resolve()
        with caplog.at_level(logging.WARNING, logger="urlkv.mutator"):
            result = m.apply({"verylongkey": "verylongvaluethatexceedsthelimit"})
        assert isinstance(result, AddressTooLong)
        assert result.max_length == 30
        assert result.length > 30
        assert resolver.resolve() is before
        assert "exceeds maximum allowed (30)" in caplog.text

    def test_exact_limit_allowed(self):
        resolver, m = make("https://example.com/", max_url_length=len("https://example.com/?a=1"))
        assert m.apply({"a": "1"}) is None


class TestMutatorHistory:
    def test_push_state(self):
        env = MemoryEnvironment("https://example.com/")
        _, m = make(env=env)
        m.apply({"test": "value"})
        assert env.length == 2
        assert env.href == "https://example.com/?test=value"
        assert env.entries[-1].state is None
        assert env.entries[-1].title == ""

    def test_replace_state(self):
        env = MemoryEnvironment("https://example.com/")
        _, m = make(env=env, history_method="replaceState")
        m.apply({"test": "value"})
        assert env.length == 1
        assert env.href == "https://example.com/?test=value"

    def test_history_disabled(self):
        env = MemoryEnvironment("https://example.com/")
        resolver, m = make(env=env, update_history=False)
        m.apply({"test": "value"})
        assert env.length == 1
        assert env.href == "https://example.com/"
        assert resolver.resolve().href == "https://example.com/?test=value"

    def test_managed_never_navigates(self):
        env = MemoryEnvironment("https://example.com/")
        resolver, m = make("https://custom.com/", env=env)
        m.apply({"test": "value"})
        assert env.length == 1
        assert resolver.resolve().href == "https://custom.com/?test=value"

    def test_rejected_write_does_not_navigate(self):
        env = MemoryEnvironment("https://example.com/")
        _, m = make(env=env, max_url_length=50)
        m.apply({"verylongkey": "verylongvaluethatexceedsthelimit"})
        assert env.length == 1


class TestMutatorSiblings:
    def test_sibling_pairs_keep_their_bytes(self):
        resolver, m = make(
            "https://example.com/?q=a+b&tag=1&tag=2&flag&app[k]=1", base="app"
        )
        m.apply({"k": "2"})
        assert resolver.resolve().query == "q=a+b&tag=1&tag=2&flag&app%5Bk%5D=2"

    def test_namespace_appended_when_absent(self):
        resolver, m = make("https://example.com/?q=a+b", base="app")
        m.apply({"k": "v"})
        assert resolver.resolve().query == "q=a+b&app%5Bk%5D=v"

    def test_deep_sibling_stable_across_writes(self):
        deep = "x" + "".join(f"[{i}a]" for i in range(12)) + "=v"
        resolver, m = make(f"https://example.com/?{deep}&app[k]=0", base="app")
        before = decode(resolver.resolve().query)["x"]
        m.apply({"k": "1"})
        middle = resolver.resolve().query
        m.apply({"k": "2"})
        after = resolver.resolve().query
        assert middle.startswith(deep + "&")
        assert after.startswith(deep + "&")
        assert decode(after)["x"] == before
