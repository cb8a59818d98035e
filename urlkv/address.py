"""Address: an immutable absolute URL value."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from .errors import InvalidAddress

_ABSOLUTE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def is_absolute(text: str) -> bool:
    """Whether ``text`` carries its own scheme and authority."""
    return bool(_ABSOLUTE.match(text.strip()))


@dataclass(frozen=True)
class Address:
    """An absolute URL split into its components.

    Scheme and host are lower-cased and an empty path becomes ``/``,
    so ``href`` reads the way a browser renders it.
    """

    scheme: str
    netloc: str
    path: str = "/"
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse an absolute URL.

        Raises:
            InvalidAddress: If ``text`` is not a well-formed absolute URL.
        """
        stripped = text.strip()
        if not stripped or any(ch.isspace() for ch in stripped):
            raise InvalidAddress(text)
        try:
            parts = urlsplit(stripped)
            parts.port  # validates the port number
        except ValueError as e:
            raise InvalidAddress(text, e) from e
        if not parts.scheme or not parts.hostname:
            raise InvalidAddress(text)
        return cls._from_parts(parts)

    @classmethod
    def join(cls, origin: str, reference: str) -> Address:
        """Resolve ``reference`` against ``origin`` and parse the result."""
        try:
            joined = urljoin(origin.rstrip("/") + "/", reference.strip())
        except ValueError as e:
            raise InvalidAddress(reference, e) from e
        return cls.parse(joined)

    @classmethod
    def _from_parts(cls, parts: SplitResult) -> Address:
        netloc = parts.netloc
        if "@" in netloc:
            userinfo, _, host = netloc.rpartition("@")
            netloc = f"{userinfo}@{host.lower()}"
        else:
            netloc = netloc.lower()
        return cls(
            scheme=parts.scheme.lower(),
            netloc=netloc,
            path=parts.path or "/",
            query=parts.query,
            fragment=parts.fragment,
        )

    @property
    def href(self) -> str:
        return urlunsplit(
            (self.scheme, self.netloc, self.path, self.query, self.fragment)
        )

    @property
    def origin(self) -> str:
        host = self.netloc.rpartition("@")[2]
        return f"{self.scheme}://{host}"

    @property
    def search(self) -> str:
        """The query with its leading ``?``, or ``""`` when empty."""
        return f"?{self.query}" if self.query else ""

    def with_query(self, query: str) -> Address:
        """Copy of this address with only the query replaced."""
        return replace(self, query=query)

    def __str__(self) -> str:
        return self.href
