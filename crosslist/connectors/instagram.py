"""
Instagram follower/following connector.

Protocol: GraphQL query-hash pagination
Auth: sessionid cookie of a logged-in browser session
Retry: none, a failed page fails the whole fetch
"""

import json
from dataclasses import dataclass
from enum import Enum

import httpx
from loguru import logger

from crosslist.config import InstagramSettings
from crosslist.exceptions import InstagramError
from crosslist.models import UserRecord
from crosslist.normalizers import normalize_display_name


class InstagramListType(str, Enum):
    FOLLOWERS = "followers"
    FOLLOWING = "following"


QUERY_HASHES = {
    InstagramListType.FOLLOWERS: "c76146de99bb02f6415203be841dd25a",
    InstagramListType.FOLLOWING: "d04b0a864b4b54837c0d870b0e77e076",
}

EDGE_KEYS = {
    InstagramListType.FOLLOWERS: "edge_followed_by",
    InstagramListType.FOLLOWING: "edge_follow",
}


@dataclass(frozen=True, slots=True)
class InstagramProfile:
    """One follower/following entry as Instagram returns it."""

    id: str
    username: str
    full_name: str = ""
    is_verified: bool = False

    def to_record(self) -> UserRecord:
        return UserRecord(username=self.username, display_name=normalize_display_name(self.full_name))


class InstagramScraper:
    """Fetch a user's followers or following with a browser session cookie.

    Usage:
        async with InstagramScraper(session_id) as scraper:
            profiles = await scraper.fetch_profiles("someone", InstagramListType.FOLLOWERS)
    """

    def __init__(
        self,
        session_id: str,
        settings: InstagramSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not session_id or not session_id.strip():
            raise InstagramError("An Instagram sessionid cookie is required")

        self.settings = settings or InstagramSettings()
        self._session_id = session_id.strip()
        self._http_client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        if self._owns_client and self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.timeout,
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client and self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.timeout,
                follow_redirects=True,
            )
            self._owns_client = True
        return self._http_client

    def _headers(self, graphql: bool = False) -> dict[str, str]:
        headers = {
            "cookie": f"sessionid={self._session_id}",
            "user-agent": self.settings.user_agent,
        }
        if graphql:
            headers["x-ig-app-id"] = self.settings.app_id
        return headers

    async def get_user_id(self, username: str) -> str | None:
        """Resolve a username to Instagram's numeric user id."""
        try:
            response = await self.http_client.get(
                f"{self.settings.base_url}/{username}/",
                params={"__a": "1", "__d": "dis"},
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.warning(f"Instagram profile lookup failed for {username}: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Instagram profile lookup for {username} returned {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError:
            return None

        user = ((data or {}).get("graphql") or {}).get("user") or {}
        user_id = user.get("id")
        return str(user_id) if user_id else None

    async def fetch_profiles(
        self,
        username: str,
        list_type: InstagramListType = InstagramListType.FOLLOWERS,
    ) -> list[InstagramProfile]:
        """Page through a follower or following list, up to settings.max_users."""
        list_type = InstagramListType(list_type)
        logger.info(f"Fetching {list_type.value} for user: {username}")

        user_id = await self.get_user_id(username)
        if not user_id:
            raise InstagramError(f"Could not find user ID for {username}")

        edge_key = EDGE_KEYS[list_type]
        profiles: list[InstagramProfile] = []
        end_cursor: str | None = None

        while True:
            variables = {
                "id": user_id,
                "include_reel": True,
                "fetch_mutual": False,
                "first": self.settings.page_size,
                "after": end_cursor,
            }
            try:
                response = await self.http_client.get(
                    f"{self.settings.base_url}/graphql/query/",
                    params={"query_hash": QUERY_HASHES[list_type], "variables": json.dumps(variables)},
                    headers=self._headers(graphql=True),
                )
            except httpx.HTTPError as e:
                raise InstagramError(f"Instagram request failed: {e}") from e

            if response.status_code != 200:
                raise InstagramError(
                    f"Instagram API error: {response.status_code}",
                    status_code=response.status_code,
                )

            try:
                edge = response.json()["data"]["user"][edge_key]
                edges = edge["edges"]
                page_info = edge["page_info"]
            except (ValueError, KeyError, TypeError) as e:
                raise InstagramError(f"Unexpected Instagram response: {e}") from e

            for item in edges:
                node = item.get("node") or {}
                if not node.get("username"):
                    continue
                profiles.append(
                    InstagramProfile(
                        id=str(node.get("id", "")),
                        username=node["username"],
                        full_name=node.get("full_name") or "",
                        is_verified=bool(node.get("is_verified")),
                    )
                )

            if len(profiles) >= self.settings.max_users:
                logger.info(f"Reached max_users={self.settings.max_users}, stopping")
                break
            end_cursor = page_info.get("end_cursor")
            if not page_info.get("has_next_page") or not end_cursor:
                break

        logger.info(f"Fetched {len(profiles)} {list_type.value} for {username}")
        return profiles

    async def fetch_records(
        self,
        username: str,
        list_type: InstagramListType = InstagramListType.FOLLOWERS,
    ) -> list[UserRecord]:
        """Same as fetch_profiles, shaped like the CSV parser's output."""
        return [profile.to_record() for profile in await self.fetch_profiles(username, list_type)]
