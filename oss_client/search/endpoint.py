"""Engine endpoint: connection context shared by every search request."""

from dataclasses import dataclass

from oss_client.config import Settings
from oss_client.search.encoding import encode

SELECT_PATH = "/select"


@dataclass
class OssEndpoint:
    """Where and as whom a search request is sent.

    Attributes:
        engine_url: Base URL of the engine, e.g. ``http://localhost:9090``
        index: Index to search
        login: API login
        api_key: API key matching ``login``
        template: Query template name on the index
    """

    engine_url: str
    index: str | None = None
    login: str | None = None
    api_key: str | None = None
    template: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "OssEndpoint":
        """Build an endpoint from client settings."""
        return cls(
            engine_url=settings.engine_url,
            index=settings.index,
            login=settings.login,
            api_key=settings.api_key.get_secret_value() if settings.api_key else None,
            template=settings.template,
        )

    def base_fragments(self) -> list[str]:
        """Fragments selecting the index and carrying credentials.

        Returns:
            ``use``, ``login``, ``key`` and ``qt`` fragments, each only
            when the matching attribute is set
        """
        fragments = []
        if self.index:
            fragments.append(f"use={encode(self.index)}")
        if self.login:
            fragments.append(f"login={encode(self.login)}")
        if self.api_key:
            fragments.append(f"key={self.api_key}")
        if self.template:
            fragments.append(f"qt={encode(self.template)}")
        return fragments

    def select_url(self, fragments: list[str]) -> str:
        """Join ``fragments`` onto the engine's select URL.

        Args:
            fragments: Query-string fragments, already encoded

        Returns:
            Full URL, with ``&`` as separator when the engine URL already
            carries a query string
        """
        base = self.engine_url.rstrip("/")
        query = ""
        if "?" in base:
            path, query = base.split("?", 1)
            base = path.rstrip("/")
        url = base + SELECT_PATH
        if query:
            url += "?" + query
        if not fragments:
            return url
        separator = "&" if "?" in url else "?"
        return url + separator + "&".join(fragments)
