"""
Schema Loader.

Builds a graphql-core schema from a schema pointer:

- http(s) URL: the standard introspection query is POSTed with httpx and
  retried with tenacity on transport errors and 5xx responses
- .json file: a stored introspection result
- .graphql/.gql file, directory or glob: SDL documents joined in sorted
  path order

SDL that uses the documentation directives without declaring them gets
the definitions appended before the schema is built.
"""

import glob
import json
import logging
from pathlib import Path
from typing import Any

import httpx
from graphql import (
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    get_introspection_query,
)
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from gqldocs.errors import GqlDocsError
from gqldocs.parser.directives import missing_directive_definitions

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".gql", ".graphqls")


class SchemaLoadError(GqlDocsError):
    """Raised when a schema cannot be read or built."""

    def __init__(self, pointer: str, reason: str):
        super().__init__(f"Failed to load schema from '{pointer}': {reason}")
        self.pointer = pointer
        self.reason = reason


class _RetryableResponse(Exception):
    """Internal signal for a 5xx introspection response."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


def is_url(pointer: str) -> bool:
    """True for http:// and https:// pointers."""
    return pointer.startswith(("http://", "https://"))


class SchemaLoader:
    """Loads GraphQL schemas from files, directories, globs or URLs.

    Usage:
        loader = SchemaLoader()
        schema = loader.load("schema.graphql")
    """

    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_wait: float = 1.0,
    ) -> None:
        """Initialize the loader.

        Args:
            timeout: HTTP timeout in seconds for URL pointers
            max_retries: Attempts for URL pointers
            retry_wait: Base wait in seconds for exponential backoff
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_wait = retry_wait

    def load(self, pointer: str | Path, headers: dict[str, str] | None = None) -> GraphQLSchema:
        """Load and build a schema.

        Args:
            pointer: URL, file path, directory or glob pattern
            headers: Extra HTTP headers for URL pointers

        Returns:
            Built GraphQLSchema

        Raises:
            SchemaLoadError: If the schema cannot be read or is invalid
        """
        pointer = str(pointer)
        if is_url(pointer):
            return self.load_url(pointer, headers)

        path = Path(pointer)
        if path.suffix.lower() == ".json" and path.is_file():
            return self.load_introspection_file(path)

        return self.load_sdl(pointer)

    def load_sdl(self, pointer: str) -> GraphQLSchema:
        """Build a schema from one or more SDL documents."""
        files = self._resolve_sdl_files(pointer)
        if not files:
            raise SchemaLoadError(pointer, "no schema files found")

        documents = []
        for file_path in files:
            try:
                documents.append(file_path.read_text(encoding="utf-8"))
            except OSError as e:
                raise SchemaLoadError(pointer, f"cannot read {file_path}: {e}") from e
        logger.debug(f"Read {len(files)} SDL file(s) for '{pointer}'")

        return self.build_from_sdl("\n\n".join(documents), pointer)

    def build_from_sdl(self, sdl: str, pointer: str = "<string>") -> GraphQLSchema:
        """Build a schema from SDL text, declaring missing doc directives."""
        extra = missing_directive_definitions(sdl)
        if extra:
            sdl = f"{sdl}\n\n{extra}"
        try:
            return build_schema(sdl)
        except (GraphQLError, TypeError) as e:
            raise SchemaLoadError(pointer, str(e)) from e

    def load_introspection_file(self, path: Path) -> GraphQLSchema:
        """Build a schema from a stored introspection result."""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SchemaLoadError(str(path), str(e)) from e
        return self.build_from_introspection(data, str(path))

    def build_from_introspection(self, data: Any, pointer: str) -> GraphQLSchema:
        """Build a schema from an introspection payload, bare or under "data"."""
        if isinstance(data, dict) and isinstance(data.get("data"), dict):
            data = data["data"]
        if not isinstance(data, dict) or "__schema" not in data:
            raise SchemaLoadError(pointer, "not an introspection result")
        try:
            return build_client_schema(data)
        except (GraphQLError, TypeError, KeyError) as e:
            raise SchemaLoadError(pointer, str(e)) from e

    def load_url(self, url: str, headers: dict[str, str] | None = None) -> GraphQLSchema:
        """Introspect a live endpoint."""
        request_headers = {"Content-Type": "application/json", **(headers or {})}
        body = {"query": get_introspection_query(descriptions=True)}

        try:
            with httpx.Client(timeout=self.timeout, headers=request_headers) as client:
                for attempt in Retrying(
                    stop=stop_after_attempt(self.max_retries),
                    wait=wait_exponential(multiplier=self.retry_wait, max=30),
                    retry=retry_if_exception_type((httpx.TransportError, _RetryableResponse)),
                    reraise=True,
                ):
                    with attempt:
                        attempt_num = attempt.retry_state.attempt_number
                        logger.info(
                            f"Introspecting {url} (attempt {attempt_num}/{self.max_retries})"
                        )
                        response = client.post(url, json=body)
                        if response.status_code >= 500:
                            raise _RetryableResponse(response.status_code)
        except _RetryableResponse as e:
            raise SchemaLoadError(url, str(e)) from e
        except (httpx.HTTPError, RetryError) as e:
            raise SchemaLoadError(url, str(e)) from e

        if response.status_code >= 400:
            raise SchemaLoadError(url, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except json.JSONDecodeError as e:
            raise SchemaLoadError(url, f"invalid JSON response: {e}") from e

        if isinstance(payload, dict) and payload.get("errors") and not payload.get("data"):
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in payload["errors"]
            )
            raise SchemaLoadError(url, messages)

        return self.build_from_introspection(payload, url)

    @staticmethod
    def _resolve_sdl_files(pointer: str) -> list[Path]:
        path = Path(pointer)
        if path.is_file():
            return [path]
        if path.is_dir():
            return sorted(
                p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in SDL_SUFFIXES
            )
        if glob.has_magic(pointer):
            return sorted(
                Path(p)
                for p in glob.glob(pointer, recursive=True)
                if Path(p).is_file()
            )
        return []
