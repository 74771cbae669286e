"""
Lookup tools backed by the public npm registry.
"""
import json
from typing import Any, Dict, List
from urllib.parse import quote

import httpx

from utils.logger import get_logger
logger = get_logger(__name__)

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


class NpmInfo:
    """Fetch the README of a package by its exact name."""

    name = "npm-info"
    description = (
        "Query NPM to fetch the README file of a particular package by name. "
        "Use this to discover implementation and usage details for a given package."
    )

    def __init__(self, registry_url: str = DEFAULT_REGISTRY_URL, timeout: float = 30.0):
        self.registry_url = registry_url.rstrip("/")
        self.timeout = timeout

    def call(self, query: str) -> str:
        package_name = query.strip()
        logger.info("npm_info", package=package_name)
        try:
            # Scoped packages are requested as @scope%2Fname
            url = f"{self.registry_url}/{quote(package_name, safe='@')}"
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.get(url)
                resp.raise_for_status()
                packument: Dict[str, Any] = resp.json()
            return packument.get("readme") or "No details available"
        except Exception as exc:
            logger.warning("npm_info_failed", package=package_name, error=str(exc))
            return f"Error: {exc}"


class NpmSearch:
    """Search the registry for packages matching free text."""

    name = "npm-search"
    description = (
        "Search NPM to find packages given a search string. The response is an array of JSON "
        "objects including package names, descriptions, and overall quality scores."
    )

    def __init__(self, registry_url: str = DEFAULT_REGISTRY_URL, timeout: float = 30.0):
        self.registry_url = registry_url.rstrip("/")
        self.timeout = timeout

    def call(self, query: str) -> str:
        logger.info("npm_search", query=query)
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.get(f"{self.registry_url}/-/v1/search", params={"text": query})
                resp.raise_for_status()
                results: List[Dict[str, Any]] = resp.json().get("objects", [])
            if len(results) < 1:
                return "Error: no results"
            info = [
                {
                    "name": result["package"]["name"],
                    "description": result["package"].get("description"),
                    "score": result["score"]["final"],
                }
                for result in results
            ]
            logger.debug("npm_search_results", query=query, result_count=len(info))
            return json.dumps(info)
        except Exception as exc:
            logger.warning("npm_search_failed", query=query, error=str(exc))
            return f"Error: {exc}"
