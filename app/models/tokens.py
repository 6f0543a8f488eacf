"""Token kinds and the aggregate produced by pagination."""

from dataclasses import dataclass, field
from enum import Enum

from app.models.responses import TokenRecord


class TokenKind(str, Enum):
    """Token standards served by the proxy, in path-matching order."""

    ERC20 = "erc20"
    ERC721 = "erc721"
    ERC1155 = "erc1155"

    @property
    def path_marker(self) -> str:
        return f"/{self.value}"

    @property
    def includes_spam(self) -> bool:
        # Only fungible balances ask Insight for spam-flagged tokens
        return self is TokenKind.ERC20

    @classmethod
    def from_path(cls, path: str) -> "TokenKind | None":
        """Pick the first kind whose marker occurs anywhere in ``path``."""
        for kind in cls:
            if kind.path_marker in path:
                return kind
        return None


@dataclass
class PaginatedResult:
    """Records concatenated across pages, in page order."""

    data: list[TokenRecord] = field(default_factory=list)
    is_nad_holder: bool = False
    pages_fetched: int = 0
