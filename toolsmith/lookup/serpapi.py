"""
Web search through SerpAPI.
"""
from typing import Any, Dict

import httpx

from utils.logger import get_logger
logger = get_logger(__name__)

DEFAULT_SERPAPI_URL = "https://serpapi.com/search"


def _pick_answer(res: Dict[str, Any]) -> str:
    """Pick the most direct answer from a SerpAPI Google response."""
    if "error" in res:
        raise ValueError(f"Got error from SerpAPI: {res['error']}")

    answer_box = res.get("answer_box")
    if isinstance(answer_box, list) and answer_box:
        answer_box = answer_box[0]
    if isinstance(answer_box, dict):
        if answer_box.get("answer"):
            return str(answer_box["answer"])
        if answer_box.get("snippet"):
            return str(answer_box["snippet"])
        if answer_box.get("snippet_highlighted_words"):
            return str(answer_box["snippet_highlighted_words"][0])

    spotlight = res.get("sports_results", {}).get("game_spotlight")
    if spotlight:
        return str(spotlight)

    knowledge_graph = res.get("knowledge_graph", {})
    if knowledge_graph.get("description"):
        return str(knowledge_graph["description"])

    organic = res.get("organic_results") or []
    if organic and organic[0].get("snippet"):
        return str(organic[0]["snippet"])

    return "No good search result found"


class SerpAPISearch:
    """Google results via SerpAPI, keyed by the caller's API key."""

    name = "search"
    description = (
        "a search engine. useful for when you need to answer questions about current events. "
        "input should be a search query."
    )

    def __init__(self, api_key: str, *, url: str = DEFAULT_SERPAPI_URL, timeout: float = 30.0):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout

    def call(self, query: str) -> str:
        logger.info("web_search", query=query)
        params = {"q": query, "api_key": self.api_key, "engine": "google", "gl": "us", "hl": "en"}
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.get(self.url, params=params)
                res = resp.json()
            return _pick_answer(res)
        except Exception as exc:
            logger.warning("web_search_failed", query=query, error=str(exc))
            return f"Error: {exc}"
