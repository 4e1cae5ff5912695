"""
Profile Sources

Implements the "get newest profile" capability consumed by the loader.

A source takes no input and returns either one raw record (a mapping keyed by the
backend's column names) or None when the table is empty. Transport and query
failures raise ProfileFetchError.

Sources:
- SupabaseProfileSource: PostgREST query against the hosted `perfil` table
- YAMLProfileSource: local YAML file, for offline rendering and fixtures
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.intake.exceptions import ProfileFetchError
from vitae.contexts.intake.logger import _log_debug

load_dotenv()
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
SUPABASE_PROFILE_TABLE = os.getenv("SUPABASE_PROFILE_TABLE", "perfil")

# Query contract: all columns, newest first, one row
NEWEST_PROFILE_QUERY = {
    "select": "*",
    "order": "creado_en.desc",
    "limit": "1",
}


class ProfileSource(ABC):
    """External collaborator that returns the most recently created profile row."""

    @abstractmethod
    async def fetch_newest(self) -> Optional[Dict[str, Any]]:
        """
        Fetch the newest profile row.

        Returns:
            Raw record mapping, or None when no profile exists

        Raises:
            ProfileFetchError: On transport or query failure
        """

    def describe(self) -> str:
        return type(self).__name__


class SupabaseProfileSource(ProfileSource):
    """
    Reads the newest profile row through Supabase's REST interface.

    Equivalent to `from(table).select('*').order('creado_en', desc).limit(1)`.
    """

    def __init__(
        self,
        url: str = SUPABASE_URL,
        api_key: str = SUPABASE_ANON_KEY,
        table: str = SUPABASE_PROFILE_TABLE,
        client: httpx.AsyncClient = None,
    ):
        """
        Args:
            url: Project URL (e.g., https://xyz.supabase.co)
            api_key: Anon/public API key
            table: Profile table name
            client: Optional pre-configured AsyncClient (owned by the caller)

        Raises:
            ValueError: If url or api_key is empty
        """
        if not url:
            raise ValueError("Supabase URL is not configured (set SUPABASE_URL)")
        if not api_key:
            raise ValueError("Supabase API key is not configured (set SUPABASE_ANON_KEY)")

        self.url = url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.client = client

    @property
    def endpoint(self) -> str:
        return f"{self.url}/rest/v1/{self.table}"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }

    def describe(self) -> str:
        return f"Supabase table '{self.table}' at {self.url}"

    async def fetch_newest(self) -> Optional[Dict[str, Any]]:
        _log_debug(f"GET {self.endpoint} {NEWEST_PROFILE_QUERY}")

        try:
            if self.client is not None:
                response = await self.client.get(
                    self.endpoint, params=NEWEST_PROFILE_QUERY, headers=self.headers
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(
                        self.endpoint, params=NEWEST_PROFILE_QUERY, headers=self.headers
                    )
        except httpx.HTTPError as e:
            raise ProfileFetchError(f"Error querying profile: {e}") from e

        if response.is_error:
            raise ProfileFetchError(
                f"Error querying profile: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            rows = response.json()
        except ValueError as e:
            raise ProfileFetchError("Error querying profile: response is not JSON") from e

        if not isinstance(rows, list):
            raise ProfileFetchError(
                f"Error querying profile: expected a list of rows, got {type(rows).__name__}"
            )

        return rows[0] if rows else None


def _error_message(response: httpx.Response) -> str:
    """Extract PostgREST's error message, falling back to the raw body."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.text


class YAMLProfileSource(ProfileSource):
    """
    Reads profile rows from a local YAML file.

    The file holds either a single record mapping or a list of records; with a
    list, the record with the greatest `creado_en` wins (same contract as the
    hosted query). Records without `creado_en` sort last.
    """

    def __init__(self, yaml_path: Path):
        self.yaml_path = Path(yaml_path)

    def describe(self) -> str:
        return f"YAML file {self.yaml_path}"

    async def fetch_newest(self) -> Optional[Dict[str, Any]]:
        if not self.yaml_path.exists():
            raise ProfileFetchError(f"Profile file not found: {self.yaml_path}")

        try:
            data = OmegaConf.to_container(OmegaConf.load(self.yaml_path), resolve=False)
        except Exception as e:
            raise ProfileFetchError(f"Error reading profile file {self.yaml_path}: {e}") from e

        if isinstance(data, dict):
            return data or None

        rows = [row for row in data if isinstance(row, dict)]
        return newest_record(rows)


def newest_record(rows: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Pick the row with the greatest creado_en; rows without one rank last."""
    if not rows:
        return None
    dated = [row for row in rows if row.get("creado_en")]
    if not dated:
        return rows[0]
    return max(dated, key=lambda row: str(row["creado_en"]))
