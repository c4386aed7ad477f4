import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .choices import ViewKinds
from .paths import PATH_TABLE

if TYPE_CHECKING:
    from .paths import PathTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of dispatching a route path: the ViewKind to serve and, for
    prefix matches, the remainder of the path after the keyword and separator."""

    kind: ViewKinds
    param: str = ""

    def __bool__(self) -> bool:
        return self.kind != ViewKinds.UNHANDLED


UNHANDLED = RouteDecision(ViewKinds.UNHANDLED)


def normalize_route_path(path: str, separator: str = "/") -> str:
    """Strips a single leading and a single trailing separator from a route path."""
    if path.startswith(separator):
        path = path[len(separator) :]
    if path.endswith(separator):
        path = path[: -len(separator)]
    return path


def dispatch_path(path: str, table: "PathTable" = PATH_TABLE) -> RouteDecision:
    """Method that maps a route path under a blog root to exactly one RouteDecision.
    Exact keyword matches win over prefix matches, prefixes are tried in table order
    and anything else is UNHANDLED. Never raises for an unmatched path.

    Args:
        path: route path relative to the blog root, e.g. "tags" or "tags/golang"
        table: PathTable to match against

    Returns:
        RouteDecision: e.g. (TAGS, "") or (TAG_ARTICLES, "golang") or (UNHANDLED, "")
    """
    route = normalize_route_path(path, table.separator)

    exact_kind = table.match_exact(route)
    if exact_kind is not None:
        return RouteDecision(exact_kind)

    prefix_match = table.match_prefix(route)
    if prefix_match is not None:
        return RouteDecision(*prefix_match)

    logger.info("Unhandled blog route path [%s]", path)
    return UNHANDLED
