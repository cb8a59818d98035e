"""AddressMutator: commits namespace contents into the address."""

from __future__ import annotations

import logging
from typing import Any

from . import codec
from .errors import AddressTooLong
from .options import DriverOptions
from .paths import root_segment, set_path
from .resolver import AddressResolver

_logger = logging.getLogger(__name__)


class AddressMutator:
    """The write path shared by every key operation.

    ``apply()`` takes the complete desired contents of the namespace,
    merges them into the decoded address at the namespace path,
    re-encodes, checks the length limit and installs the result.
    Live (non-managed) resolvers with history updates enabled also
    get a ``pushState``/``replaceState`` call on their environment.
    """

    def __init__(self, resolver: AddressResolver, options: DriverOptions) -> None:
        self._resolver = resolver
        self._options = options

    def apply(self, contents: dict[str, Any]) -> AddressTooLong | None:
        """Replace the namespace contents with ``contents``.

        Returns:
            None on success, or an ``AddressTooLong`` describing a
            rejected write. A rejected write changes nothing.
        """
        current = self._resolver.resolve()

        if self._options.base:
            query = self._splice(current.query, contents)
        else:
            query = codec.encode(contents)

        candidate = current.with_query(query)
        length = len(candidate.href)
        if length > self._options.max_url_length:
            rejected = AddressTooLong(length, self._options.max_url_length)
            _logger.warning("%s", rejected)
            return rejected

        self._resolver.install(candidate)
        _logger.debug("Installed address %s", candidate.href)

        environment = self._resolver.environment
        if (
            not self._resolver.managed
            and environment is not None
            and self._options.update_history
        ):
            if self._options.history_method == "pushState":
                environment.push_state(None, "", candidate.href)
            else:
                environment.replace_state(None, "", candidate.href)
            _logger.debug("%s %s", self._options.history_method, candidate.href)
        return None

    def _splice(self, query: str, contents: dict[str, Any]) -> str:
        # Pairs outside the namespace root are kept byte for byte; only
        # the namespace root's pairs are decoded and re-encoded.
        base = self._options.base
        root = root_segment(base)
        kept: list[str] = []
        owned: list[str] = []
        position: int | None = None
        for pair in query.split("&"):
            if not pair:
                continue
            if codec.root_key(pair) == root:
                if position is None:
                    position = len(kept)
                owned.append(pair)
            else:
                kept.append(pair)

        subtree = codec.decode("&".join(owned))
        set_path(subtree, base, contents)
        encoded = codec.encode(subtree)
        if encoded:
            kept.insert(len(kept) if position is None else position, encoded)
        return "&".join(kept)
