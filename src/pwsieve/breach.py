"""k-anonymity lookups against the Pwned Passwords range API.

Only the first five hex characters of the password's SHA-1 digest are sent.
The service answers with every ``<suffix>:<count>`` line sharing that prefix
and the comparison against the remaining 35 characters happens locally.
"""
from __future__ import annotations

import logging

import requests

from pwsieve.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT, PWNED_PASSWORDS_RANGE_ENDPOINT
from pwsieve.errors import BreachLookupError
from pwsieve.hashing import sha1_hex_upper

logger = logging.getLogger(__name__)

PREFIX_LEN = 5
USER_AGENT = "pwsieve"


def split_digest(password: str) -> tuple[str, str]:
    """Return the (prefix, suffix) split of the uppercase SHA-1 digest."""

    digest = sha1_hex_upper(password)
    return digest[:PREFIX_LEN], digest[PREFIX_LEN:]


class BreachClient:
    """Query a Pwned-Passwords compatible range endpoint.

    Every lookup is one GET with an explicit ``(connect, read)`` timeout.
    Failures raise :class:`BreachLookupError` and are never retried.
    """

    def __init__(
        self,
        endpoint: str = PWNED_PASSWORDS_RANGE_ENDPOINT,
        *,
        session: requests.Session | None = None,
        timeout: tuple[float, float] = (DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT),
        add_padding: bool = True,
    ) -> None:
        self.endpoint = endpoint if endpoint.endswith("/") else endpoint + "/"
        self.timeout = timeout
        self.add_padding = add_padding
        self._session = session or requests.Session()

    def fetch_range(self, prefix: str) -> str:
        headers = {"User-Agent": USER_AGENT}
        if self.add_padding:
            headers["Add-Padding"] = "true"
        try:
            response = self._session.get(f"{self.endpoint}{prefix}", headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise BreachLookupError(f"Breach lookup failed: {exc}") from exc
        logger.debug("Range lookup for prefix %s returned HTTP %s", prefix, response.status_code)
        return response.text

    def query(self, password: str) -> bool:
        """Return True when the password appears in the breach corpus."""

        prefix, suffix = split_digest(password)
        return suffix in self.fetch_range(prefix).upper()

    def count(self, password: str) -> int:
        """Return how often the password was seen in breaches (0 if never)."""

        prefix, suffix = split_digest(password)
        for line in self.fetch_range(prefix).splitlines():
            if ":" not in line:
                continue
            line_suffix, count = line.strip().split(":", 1)
            if line_suffix.upper() == suffix:
                try:
                    return int(count)
                except ValueError:
                    raise BreachLookupError(f"Malformed count in range response: {count!r}") from None
        return 0

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> BreachClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
