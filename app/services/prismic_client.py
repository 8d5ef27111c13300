import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import httpx

from app.errors import DataFetchError, InvalidCursorError
from app.settings import Settings, settings

logger = logging.getLogger(__name__)


def at(path: str, value: str) -> str:
    """Build a Prismic equality predicate, e.g. at("document.type", "posts")."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'[at({path}, "{escaped}")]'


class PrismicClient:
    """
    Thin client for the Prismic REST v2 API.
    Every failure (transport, HTTP status, bad JSON) surfaces as DataFetchError.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        access_token: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        config: Settings = settings,
    ):
        self.endpoint = (endpoint or config.PRISMIC_API_ENDPOINT).rstrip("/")
        self.access_token = (
            access_token if access_token is not None else config.PRISMIC_ACCESS_TOKEN
        )
        self.http = http or httpx.Client(timeout=config.PRISMIC_TIMEOUT)
        self._master_ref: Optional[str] = None

    def close(self) -> None:
        self.http.close()

    def master_ref(self) -> str:
        if self._master_ref is None:
            api = self._get_json(self.endpoint, self._auth_params())
            refs = api.get("refs") or []
            master = next((r for r in refs if r.get("isMasterRef")), None)
            if not master:
                raise DataFetchError("Prismic API did not return a master ref")
            self._master_ref = master["ref"]
        return self._master_ref

    def query(
        self,
        predicates: Union[str, Sequence[str]],
        *,
        fetch: Optional[List[str]] = None,
        page_size: Optional[int] = None,
        after: Optional[str] = None,
        orderings: Optional[str] = None,
        ref: Optional[str] = None,
    ) -> Dict[str, Any]:
        if isinstance(predicates, str):
            predicates = [predicates]

        params: Dict[str, Any] = {
            "ref": ref or self.master_ref(),
            "q": f"[{''.join(predicates)}]",
        }
        if fetch:
            params["fetch"] = ",".join(fetch)
        if page_size is not None:
            params["pageSize"] = page_size
        if after:
            params["after"] = after
        if orderings:
            params["orderings"] = orderings
        params.update(self._auth_params())

        logger.debug(f"Querying Prismic with {params['q']}")
        return self._get_json(f"{self.endpoint}/documents/search", params)

    def get_by_uid(
        self, document_type: str, uid: str, ref: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        response = self.query(at(f"my.{document_type}.uid", uid), ref=ref)
        results = response.get("results") or []
        return results[0] if results else None

    def get_by_id(
        self, document_id: str, ref: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        response = self.query(at("document.id", document_id), ref=ref)
        results = response.get("results") or []
        return results[0] if results else None

    def get_page(self, url: str) -> Dict[str, Any]:
        """
        Follow an opaque pagination cursor (a next_page URL).
        Only cursors pointing at this endpoint's search API are fetched.
        """
        if not self.is_search_url(url):
            logger.warning(f"Refusing to follow foreign cursor {url!r}")
            raise InvalidCursorError("Cursor does not point at the Prismic search API")
        return self._get_json(url, None)

    def is_search_url(self, url: str) -> bool:
        try:
            candidate = httpx.URL(url)
        except httpx.InvalidURL:
            return False
        search = httpx.URL(f"{self.endpoint}/documents/search")
        return (
            candidate.scheme,
            candidate.host,
            candidate.port,
            candidate.path,
        ) == (search.scheme, search.host, search.port, search.path)

    def _auth_params(self) -> Dict[str, str]:
        return {"access_token": self.access_token} if self.access_token else {}

    def _get_json(self, url: str, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        try:
            response = self.http.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Prismic answered {e.response.status_code} for {e.request.url}"
            )
            raise DataFetchError(
                f"Prismic request failed with status {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP connection error talking to Prismic: {e}")
            raise DataFetchError(f"Could not reach Prismic: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from Prismic at {url}: {e}")
            raise DataFetchError("Prismic returned invalid JSON") from e
