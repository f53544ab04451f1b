# =============================================================================
# core/kenall.py  —  ken-all API client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues exactly one GET per call against the ken-all postal-code API and
#   maps the JSON body into AddressRecord objects.
#
#     GET {base}/postalcode/{code}                      → lookup by code
#     GET {base}/postalcode?q=..[&prefecture=..][&city=..] → free-text search
#
#   Both requests carry "Authorization: Token <key>".
#
# RESULT DISCIPLINE:
#   Public methods never raise for upstream trouble.  They return one of
#   Found / NotFound / UpstreamFailure (core/models.py):
#     - Found          non-empty "data" array, order preserved
#     - NotFound       empty "data" array, or a 404 on the by-code lookup
#     - UpstreamFailure anything else (HTTP error, network error, bad JSON,
#                       a body that is not the expected shape)
#   No retries and no backoff: one request, one outcome.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional

from core.config import Settings
from core.models import (
    AddressRecord,
    Found,
    LookupOutcome,
    LookupPostalCodeInput,
    NotFound,
    SearchAddressInput,
    UpstreamFailure,
)

logger = logging.getLogger(__name__)


def parse_records(payload: Any) -> list[AddressRecord]:
    """Map an upstream response body to AddressRecords, one per entry.

    Raises:
        ValueError: if the body is not an object with a ``data`` array, or
            an entry of that array is not an object.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise ValueError("Malformed response: missing 'data' array")
    records = []
    for index, entry in enumerate(payload["data"]):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Malformed response: data[{index}] is {type(entry).__name__}, not an object"
            )
        records.append(AddressRecord.from_upstream(entry))
    return records


class KenallClient:
    """Thin synchronous client for the two ken-all endpoints we use."""

    def __init__(self, settings: Settings):
        self.base_url = settings.base_url
        self._api_key = settings.api_key
        self._timeout = settings.timeout

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------
    def _build_request(
        self, path: str, params: Optional[dict[str, str]] = None
    ) -> urllib.request.Request:
        url = f"{self.base_url}{path}"
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"
        req = urllib.request.Request(url, method="GET")
        req.add_header("Authorization", f"Token {self._api_key}")
        req.add_header("Accept", "application/json")
        return req

    def _get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        req = self._build_request(path, params)
        logger.debug(f"GET {req.full_url}")

        kwargs = {} if self._timeout is None else {"timeout": self._timeout}
        with urllib.request.urlopen(req, **kwargs) as response:
            body = response.read()
        return json.loads(body.decode("utf-8"))

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    def lookup_postal_code(self, args: LookupPostalCodeInput) -> LookupOutcome:
        """Look up the addresses registered under one postal code.

        Args:
            args: Validated input.  The hyphen-stripped code goes upstream;
                  the original string is echoed in not-found messages.

        Returns:
            Found with kana-bearing records, NotFound for an empty result or
            an upstream 404, UpstreamFailure for anything else.
        """
        path = f"/postalcode/{urllib.parse.quote(args.normalized, safe='')}"
        try:
            records = parse_records(self._get_json(path))
        except urllib.error.HTTPError as e:
            if e.code == 404:
                logger.info(f"Upstream 404 for postal code {args.postal_code!r}")
                return NotFound(f"Postal code not found: {args.postal_code}")
            return self._failure("Failed to lookup postal code", e)
        except (urllib.error.URLError, OSError, ValueError) as e:
            return self._failure("Failed to lookup postal code", e)

        if not records:
            return NotFound(f"No address found for postal code: {args.postal_code}")
        return Found(records)

    def search_address(self, args: SearchAddressInput) -> LookupOutcome:
        """Search postal codes by free-text address.

        Unlike the by-code lookup, a 404 here is an ordinary failure.
        """
        try:
            records = parse_records(self._get_json("/postalcode", args.query_params()))
        except (urllib.error.URLError, OSError, ValueError) as e:
            return self._failure("Failed to search address", e)

        if not records:
            return NotFound(f"No results found for query: {args.query}")
        return Found(records)

    @staticmethod
    def _failure(prefix: str, error: Exception) -> UpstreamFailure:
        logger.warning(f"{prefix}: {error}")
        return UpstreamFailure(f"{prefix}: {error}")
