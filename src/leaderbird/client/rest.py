"""REST API client for Leaderbird."""

import asyncio
import json
from collections.abc import Callable, Mapping
from typing import Any

import aiohttp
from multidict import CIMultiDict

from ..exceptions import ResponseDecodeError
from ..models.result import (
    ApiFailure,
    ApiResponse,
    Result,
    Success,
    TransportFailure,
)
from ..utils.config import Config
from ..utils.formatting import to_query_string
from ..utils.logger import logger
from .auth import Credentials, get_auth_headers, sign_request

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
SUPPORTED_METHODS = ("GET", "POST")

ErrorHandler = Callable[[ApiResponse], Any]
FatalHandler = Callable[[TransportFailure], Any]


def _decode(raw: bytes, charset: str, errors: str = "strict") -> str:
    """Decode a response body, falling back to UTF-8 for unknown charsets."""
    try:
        return raw.decode(charset, errors)
    except LookupError:
        return raw.decode("utf-8", errors)


def log_api_error(response: ApiResponse) -> None:
    """Default global error handler."""
    logger.error(f"Error received with HTTP status code: {response.status}")
    logger.error("Please refer to the API documentation.")
    logger.error(f"Full response: {response}")


def log_transport_failure(failure: TransportFailure) -> None:
    """Default fatal handler. Connection-level failures are not retried."""
    logger.critical(
        f"Unrecoverable error: {failure.method} {failure.url} - {failure.error!r}"
    )


class LeaderbirdClient:
    """Async client for the Leaderbird leaderboard API."""

    def __init__(
        self,
        public_key: str,
        private_key: str,
        base_url: str = Config.DEFAULT_BASE_URL,
        global_error_handler: ErrorHandler | None = None,
        fatal_error_handler: FatalHandler | None = None,
        timeout: float | None = None,
    ):
        self.base_url = Config.DEFAULT_BASE_URL
        self.global_error_handler: ErrorHandler = log_api_error
        self.fatal_error_handler: FatalHandler = log_transport_failure
        self.timeout = Config.REST_TIMEOUT
        self.session: aiohttp.ClientSession | None = None

        self.set_options(
            {
                "public_key": public_key,
                "private_key": private_key,
                "base_url": base_url,
                "global_error_handler": global_error_handler,
                "fatal_error_handler": fatal_error_handler,
                "timeout": timeout,
            }
        )

    @classmethod
    def from_env(cls, **overrides) -> "LeaderbirdClient":
        """Create a client from LEADERBIRD_* environment variables."""
        if not Config.validate():
            logger.warning("Leaderbird API keys are not set in the environment")

        options = {
            "public_key": Config.PUBLIC_KEY,
            "private_key": Config.PRIVATE_KEY,
            "base_url": Config.BASE_URL,
            "timeout": Config.REST_TIMEOUT,
        }
        options.update(overrides)
        return cls(**options)

    def set_options(self, options: Mapping[str, Any]) -> None:
        """
        Configure credentials and optional overrides.

        Args:
            options: Mapping with required ``public_key`` and ``private_key``,
                and optional ``base_url``, ``global_error_handler``,
                ``fatal_error_handler`` and ``timeout``. Missing or empty
                optional values keep the current setting.

        Raises:
            KeyError: If a key of the credential pair is missing
        """
        self.credentials = Credentials(
            public_key=options["public_key"],
            private_key=options["private_key"],
        )

        if options.get("base_url"):
            self.base_url = options["base_url"]

        if options.get("global_error_handler"):
            self.global_error_handler = options["global_error_handler"]

        if options.get("fatal_error_handler"):
            self.fatal_error_handler = options["fatal_error_handler"]

        if options.get("timeout"):
            self.timeout = options["timeout"]

    async def __aenter__(self):
        """Context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create aiohttp session."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
            logger.info(f"Leaderbird client connected to {self.base_url}")

    async def close(self) -> None:
        """Close aiohttp session."""
        if self.session and not self.session.closed:
            await self.session.close()
            logger.info("Leaderbird client closed")

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Result:
        """
        Make a signed HTTP request.

        The signature covers the request's own timestamp and ``path``; it is
        computed fresh for every call.

        Args:
            method: "GET" or "POST"
            path: API path without leading slash (e.g., "player/register")
            body: JSON-serializable payload (POST only)
            params: Query parameters appended to the URL

        Returns:
            Success, ApiFailure or TransportFailure

        Raises:
            ValueError: On an unsupported HTTP method
            ResponseDecodeError: If a 2xx/3xx body is not valid text or JSON
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if self.session is None or self.session.closed:
            await self.connect()

        url = f"{self.base_url}/{path}"
        if params:
            url = f"{url}?{to_query_string(params)}"

        signature, timestamp = sign_request(self.credentials, path)
        headers = get_auth_headers(self.credentials, signature, timestamp)

        data = None
        if method == "POST":
            headers["Content-Type"] = JSON_CONTENT_TYPE
            if body is not None:
                data = json.dumps(body, separators=(",", ":")).encode("utf-8")

        logger.debug(
            f"REST request ->\nmethod: {method}\nurl: {url}\nbody: {data!r}\nheaders: {headers}\n{'=' * 60}"
        )

        try:
            async with self.session.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                status = response.status
                raw = await response.read()
                charset = response.charset or "utf-8"
                response_headers = CIMultiDict(response.headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"REST request failed: {method} {url} - {e!r}")
            return TransportFailure(method=method, url=url, error=e)

        if not 200 <= status < 400:
            # Error pages need not be valid text in the declared charset
            api_response = ApiResponse(
                method=method,
                url=url,
                status=status,
                body=_decode(raw, charset, errors="replace"),
                headers=response_headers,
            )
            logger.warning(f"REST API error: {status} - {method} {url}")
            return ApiFailure(response=api_response)

        try:
            text = _decode(raw, charset)
        except UnicodeDecodeError as e:
            raise ResponseDecodeError(
                ApiResponse(
                    method=method,
                    url=url,
                    status=status,
                    body=_decode(raw, charset, errors="replace"),
                    headers=response_headers,
                ),
                f"Undecodable {status} response body: {e}",
            ) from e

        api_response = ApiResponse(
            method=method, url=url, status=status, body=text, headers=response_headers
        )

        # Redirect-style and no-content answers may come back empty
        if not api_response.body.strip():
            return Success(value=None, response=api_response)

        try:
            value = api_response.json()
        except json.JSONDecodeError as e:
            raise ResponseDecodeError(
                api_response, f"Invalid JSON in {api_response.status} response: {e}"
            ) from e

        return Success(value=value, response=api_response)

    def dispatch(
        self,
        path: str,
        method: str,
        body: Any = None,
        on_success: Callable[[Any], Any] | None = None,
        on_error: ErrorHandler | None = None,
    ) -> asyncio.Task:
        """
        Schedule a signed request and route its outcome to callbacks.

        Returns immediately; must be called from a running event loop.
        Exactly one of ``on_success``, ``on_error`` (or the global error
        handler) and the fatal handler fires per request.

        Returns:
            Task resolving to the request's Result
        """
        return asyncio.get_running_loop().create_task(
            self._dispatch(path, method, body, on_success, on_error)
        )

    async def _dispatch(
        self,
        path: str,
        method: str,
        body: Any,
        on_success: Callable[[Any], Any] | None,
        on_error: ErrorHandler | None,
    ) -> Result:
        result = await self.request(method, path, body)
        self._route(result, on_success, on_error)
        return result

    def _route(
        self,
        result: Result,
        on_success: Callable[[Any], Any] | None,
        on_error: ErrorHandler | None,
    ) -> None:
        if isinstance(result, Success):
            if on_success is not None:
                on_success(result.value)
        elif isinstance(result, ApiFailure):
            handler = on_error if on_error is not None else self.global_error_handler
            handler(result.response)
        else:
            self.fatal_error_handler(result)

    # Leaderboards

    async def get_scores(
        self,
        leaderboard_id,
        limit,
        timeframe,
        platform_id=None,
    ) -> Result:
        """
        Get ranked scores for a leaderboard.

        Args:
            leaderboard_id: Leaderboard ID
            limit: Maximum number of entries
            timeframe: Server-defined timeframe (e.g., "daily", "alltime")
            platform_id: Optional platform scope

        Returns:
            Result carrying the score listing on success
        """
        path = f"leaderboard/{leaderboard_id}/scores/{timeframe}/{limit}"
        if platform_id:
            path = f"{path}/{platform_id}"
        return await self.request("GET", path)

    async def submit_score(
        self, leaderboard_id, player_id, platform_id, score
    ) -> Result:
        """Submit a player's score to a leaderboard."""
        payload = {
            "player_id": player_id,
            "platform_id": platform_id,
            "score": score,
        }
        result = await self.request(
            "POST", f"leaderboard/{leaderboard_id}/score/submit", payload
        )
        if result.ok:
            logger.info(
                f"Score submitted: leaderboard={leaderboard_id} player={player_id} score={score}"
            )
        return result

    # Players

    async def register_player(self, username) -> Result:
        """Register a named player."""
        return await self.request("POST", "player/register", {"username": username})

    async def register_anonymous_player(self) -> Result:
        """Register a player without a username."""
        return await self.request("POST", "player/register_anon")

    async def get_player(self, player_id) -> Result:
        """Get a player by ID."""
        return await self.request("GET", f"player/{player_id}")

    async def get_player_score(
        self,
        leaderboard_id,
        player_id,
        score_type,
        timeframe,
        platform_id=None,
    ) -> Result:
        """
        Get a single player's score on a leaderboard.

        Args:
            leaderboard_id: Leaderboard ID
            player_id: Player ID
            score_type: Server-defined score type (e.g., "best", "latest")
            timeframe: Server-defined timeframe
            platform_id: Optional platform scope

        Returns:
            Result carrying the score on success
        """
        path = (
            f"leaderboard/{leaderboard_id}/player/{player_id}"
            f"/score/{score_type}/{timeframe}"
        )
        if platform_id:
            path = f"{path}/{platform_id}"
        return await self.request("GET", path)

    # Misc

    async def get_platforms(self) -> Result:
        """List platforms."""
        return await self.request("GET", "platforms")

    async def ping(self) -> Result:
        """Health check."""
        return await self.request("GET", "ping")
