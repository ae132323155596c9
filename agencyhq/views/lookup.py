"""
Client cross-referencing: name lookups and post counts.
"""
from collections import Counter
from typing import Any, Dict, Iterable, Optional

from .records import field


class ClientIndex:
    """Id -> client table built once per load."""

    def __init__(self, clients: Iterable[Any]):
        self._by_id: Dict[str, Any] = {}
        for client in clients:
            self._by_id[str(field(client, "id"))] = client

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, client_id: Any) -> bool:
        return str(client_id) in self._by_id

    def get(self, client_id: Any) -> Optional[Any]:
        if client_id is None:
            return None
        return self._by_id.get(str(client_id))

    def name(self, client_id: Any, placeholder: str = "") -> str:
        client = self.get(client_id)
        if client is None:
            return placeholder
        return field(client, "company_name", placeholder) or placeholder


def count_posts_by_client(posts: Iterable[Any]) -> Counter:
    """Number of posts per client id (keys as strings)."""
    return Counter(str(field(post, "client_id")) for post in posts)


def posts_count(counts: Counter, client_id: Any) -> int:
    return counts.get(str(client_id), 0)
