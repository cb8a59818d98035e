"""AddressResolver: owns the notion of the current address."""

from __future__ import annotations

import logging

from .address import Address, is_absolute
from .env.base import Environment
from .errors import EnvironmentUnavailable

_logger = logging.getLogger(__name__)


class AddressResolver:
    """Resolves and caches the current address for one driver.

    With an explicit ``url`` the address is parsed once and cached;
    the environment is only consulted to complete a relative ``url``.
    Without one, every ``resolve()`` reads the environment's live
    address until ``install()`` has been called, after which the
    installed address is returned instead.

    Args:
        url: Explicit address string, or None to follow the environment.
        environment: The live environment, or None when headless.
    """

    def __init__(self, url: str | None = None, environment: Environment | None = None) -> None:
        self._url = url or None
        self._environment = environment
        self._current: Address | None = None

    @property
    def managed(self) -> bool:
        """Whether the address is held in memory only."""
        return self._url is not None

    @property
    def environment(self) -> Environment | None:
        return self._environment

    def resolve(self) -> Address:
        """Return the current address.

        Raises:
            EnvironmentUnavailable: If a live environment is needed
                but none was given.
            InvalidAddress: If the configured ``url`` cannot be parsed.
        """
        if self._current is not None:
            return self._current

        if self._url is not None:
            self._current = self._parse_configured(self._url)
            _logger.debug("Resolved configured address %s", self._current.href)
            return self._current

        if self._environment is None:
            raise EnvironmentUnavailable(
                "URL is required when no live environment is available"
            )
        return Address.parse(self._environment.href)

    def install(self, address: Address) -> None:
        """Make ``address`` the current one. Does not navigate."""
        self._current = address

    def _parse_configured(self, url: str) -> Address:
        if is_absolute(url):
            return Address.parse(url)
        if self._environment is None:
            raise EnvironmentUnavailable(
                f"Cannot resolve relative URL {url!r} without a live environment"
            )
        return Address.join(self._environment.origin, url)
