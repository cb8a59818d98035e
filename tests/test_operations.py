"""Tests for KeyOperations and its error policies."""

import pytest

from urlkv import (
    AddressMutator,
    AddressResolver,
    DriverOptions,
    InvalidAddress,
    KeyOperations,
    StorageOperationFailed,
)
from urlkv.operations import fail_loud, fail_soft


def make(url, base=None):
    options = DriverOptions(url=url, base=base)
    resolver = AddressResolver(options.url)
    return KeyOperations(resolver, AddressMutator(resolver, options), options.base)


class TestPolicies:
    def test_fail_soft_returns_default(self):
        @fail_soft(list)
        def boom():
            raise RuntimeError("nope")

        assert boom() == []

    def test_fail_soft_passes_result(self):
        @fail_soft(lambda: None)
        def fine():
            return 3

        assert fine() == 3

    def test_fail_loud_wraps(self):
        @fail_loud("Failed to frob")
        def boom():
            raise RuntimeError("nope")

        with pytest.raises(StorageOperationFailed, match="Failed to frob: nope"):
            boom()

    def test_fail_loud_keeps_configuration_errors(self):
        @fail_loud("Failed to frob")
        def boom():
            raise InvalidAddress("bad")

        with pytest.raises(InvalidAddress):
            boom()


class TestKeyOperations:
    def test_contents_untyped(self):
        ops = make("https://example.com/?ns[a]=1&b=2", base="ns")
        assert ops.contents() == {"a": "1"}

    def test_write_then_read(self):
        ops = make("https://example.com/", base="ns")
        ops.set_item("a", [1, 2])
        assert ops.get_item("a") == [1, 2]
        assert ops.get_keys() == ["a"]

    def test_invalid_url_reads_soft_writes_loud(self):
        ops = make("http://example.com:99999/")
        assert ops.get_item("a") is None
        with pytest.raises(InvalidAddress):
            ops.remove_item("a")

    def test_rejected_write_returns_reason(self):
        options = DriverOptions(url="https://example.com/", max_url_length=25)
        resolver = AddressResolver(options.url)
        ops = KeyOperations(resolver, AddressMutator(resolver, options))
        rejected = ops.set_item("key", "a value that is too long")
        assert rejected is not None
        assert ops.get_keys() == []
