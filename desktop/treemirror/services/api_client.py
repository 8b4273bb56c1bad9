"""REST API client for the tree, status and selection services"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class APIClient:
    """Async HTTP client for the remote workspace API"""

    def __init__(self, base_url: str, api_token: str = "", timeout: float = 60.0):
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {}
            if self.api_token:
                headers["X-API-Token"] = self.api_token
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout, connect=10.0),
                headers=headers,
            )
        return self._client

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    # === Tree ===

    async def get_file_tree_structure(self, path: str) -> dict:
        """Full recursive snapshot of the directory at ``path``"""
        client = self._get_client()
        response = await client.get("/api/v1/tree", params={"path": path})
        response.raise_for_status()
        return response.json()

    async def get_files_status(self, repo_path: str, file_paths: list[str]) -> list[dict]:
        """Batched status lookup for paths inside ``repo_path``"""
        client = self._get_client()
        response = await client.post(
            "/api/v1/files/status",
            json={"repo_path": repo_path, "file_paths": file_paths},
        )
        response.raise_for_status()
        return response.json()

    # === Selection ===

    async def list_selected_files(self) -> list[str]:
        client = self._get_client()
        response = await client.get("/api/v1/selection")
        response.raise_for_status()
        return response.json()

    async def add_selected_file(self, path: str) -> None:
        client = self._get_client()
        response = await client.post("/api/v1/selection", json={"path": path})
        response.raise_for_status()

    async def remove_selected_file(self, path: str) -> None:
        client = self._get_client()
        response = await client.delete("/api/v1/selection", params={"path": path})
        response.raise_for_status()
