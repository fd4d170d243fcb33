"""HTTP client abstraction for fetching plaintext version files.

This module provides:
- HttpClient: Protocol for HTTP GET of text resources (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Canned responses for tests
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from typing import Protocol, runtime_checkable

from relver import __version__
from relver.core.result import Err, Ok, Result
from relver.version.errors import FetchError

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
]


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations."""

    def get_text(self, url: str) -> Result[str, FetchError]:
        """Fetch URL and return the body decoded as UTF-8.

        Args:
            url: Fully-qualified URL to fetch

        Returns:
            Ok with response text (untrimmed), or Err with FetchError
        """
        ...


class RealHttpClient:
    """HTTP client using urllib.

    Handles HTTPS with system certificates, redirects (urllib default),
    and a per-request socket timeout.
    """

    def __init__(self, timeout: float = 30.0, user_agent: str = f"relver/{__version__}") -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def _request(self, url: str) -> Result[bytes, FetchError]:
        try:
            req = urllib.request.Request(
                url,
                headers={"User-Agent": self.user_agent},
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(FetchError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(FetchError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(FetchError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(FetchError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(FetchError(url=url, status=0, message=str(e)))

    def get_text(self, url: str) -> Result[str, FetchError]:
        result = self._request(url)
        if isinstance(result, Err):
            return result

        try:
            return Ok(result.value.decode("utf-8"))
        except UnicodeDecodeError as e:
            return Err(FetchError(url=url, status=0, message=f"Decode error: {e}"))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_text("https://dl.k8s.io/release/stable.txt", "v1.18.0\\n")
        client.set_text(url, FetchError(url=url, status=503, message="Unavailable"))

    Unknown URLs answer 404.
    """

    def __init__(self) -> None:
        self._text_responses: dict[str, str | FetchError] = {}
        self.calls: list[str] = []

    def set_text(self, url: str, response: str | FetchError) -> None:
        self._text_responses[url] = response

    def get_text(self, url: str) -> Result[str, FetchError]:
        self.calls.append(url)

        if url not in self._text_responses:
            return Err(FetchError(url=url, status=404, message="Not Found (mock)"))

        response = self._text_responses[url]
        if isinstance(response, FetchError):
            return Err(response)
        return Ok(response)
