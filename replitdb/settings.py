from dataclasses import dataclass
import math
import os
from typing import Mapping, Optional
from urllib.parse import urlsplit

from replitdb.errors import ConfigError


DB_URL_ENV = "REPLIT_DB_URL"
TIMEOUT_ENV = "REPLIT_DB_TIMEOUT"
HOSTED_NETLOC = "kv.replit.com"
TOKEN_FORBIDDEN = set("/?#")


def _split_db_url(db_url: str):
    """Split a full database URL into its base url and trailing token."""
    base, _, token = db_url.rstrip("/").rpartition("/")
    return base, token


def _parse_timeout(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"timeout must be a number of seconds, got {value!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(f"timeout must be a positive number of seconds, got {value!r}")
    return timeout


@dataclass(frozen=True)
class Config:
    """
    Everything a client needs to reach a database.

    A Config is validated on construction and immutable afterwards, so a
    client holding one can always issue requests.
    """

    url: str
    token: str
    timeout: Optional[float] = None

    def __post_init__(self):
        if not self.url:
            raise ConfigError("a database url must be provided")
        if not self.token:
            raise ConfigError("a database token must be provided")
        parts = urlsplit(self.url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigError(f"invalid database url: {self.url!r}")
        if TOKEN_FORBIDDEN.intersection(self.token) or any(c.isspace() for c in self.token):
            raise ConfigError("the database token must not contain whitespace, '/', '?' or '#'")
        object.__setattr__(self, "timeout", _parse_timeout(self.timeout))
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @property
    def endpoint(self) -> str:
        """The address every request is made against."""
        return f"{self.url}/{self.token}"

    @classmethod
    def resolve(
        cls,
        url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        """Resolve a Config from explicit arguments and the environment.

        Parameters
        ----------
        url : str, optional
            Either a base url used together with `token` or a full database
            url whose last path segment is the token.
            Extracts from the environment variable "REPLIT_DB_URL" by default.
        token : str, optional
            The database token. Explicit values override a token embedded in
            `url`.
        timeout : float, optional
            Seconds to wait on each request.
            Extracts from the environment variable "REPLIT_DB_TIMEOUT" by default.
            When unset, requests wait as long as the HTTP library does.
        environ : Mapping[str, str], optional
            Replace `os.environ` as the environment source.

        Raises
        ------
        ConfigError
            A required value is missing or malformed.
        """
        environ = os.environ if environ is None else environ

        if not url:
            db_url = environ.get(DB_URL_ENV)
            if not db_url:
                raise ConfigError(f"no database url given and {DB_URL_ENV} is not set")
            url, embedded = _split_db_url(db_url)
            token = token or embedded
        elif not token:
            url, token = _split_db_url(url)

        if timeout is None:
            timeout = environ.get(TIMEOUT_ENV)

        return cls(url=url, token=token, timeout=timeout)

    @classmethod
    def custom_url(cls, db_url: str, timeout: Optional[float] = None) -> "Config":
        """
        Create a Config from a full database url that must point at the hosted
        service.
        """
        if urlsplit(db_url).netloc != HOSTED_NETLOC:
            raise ConfigError(f"invalid url for a custom url: {db_url!r}")
        url, token = _split_db_url(db_url)
        return cls(url=url, token=token, timeout=timeout)
