"""The path table: literal route keywords under a blog root and the
ViewKinds they select. Matching against it lives in dispatch.py."""

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType

from django.core.exceptions import ImproperlyConfigured  # type: ignore

from .choices import ViewKinds

SEPARATOR = "/"


@dataclass(frozen=True)
class PathEntry:
    """A route keyword, the ViewKind selected when the route path is exactly the
    keyword and, optionally, the ViewKind selected when the keyword is followed by
    the separator and a parameter."""

    keyword: str
    exact_kind: ViewKinds
    prefix_kind: ViewKinds | None = None


class PathTable:
    """Read-only, validated collection of PathEntry objects. The order of the
    entries is the priority order of the prefix match."""

    def __init__(self, entries, separator: str = SEPARATOR):
        self.entries: tuple[PathEntry, ...] = tuple(entries)
        self.separator = separator
        self.validate()
        self.exact = MappingProxyType({entry.keyword: entry.exact_kind for entry in self.entries})
        self.prefixes: tuple[tuple[str, ViewKinds], ...] = tuple(
            (entry.keyword + separator, entry.prefix_kind) for entry in self.entries if entry.prefix_kind
        )
        self.keywords = MappingProxyType(
            {
                kind: entry.keyword
                for entry in self.entries
                for kind in (entry.exact_kind, entry.prefix_kind)
                if kind is not None
            }
        )

    def validate(self) -> None:
        """Raises ImproperlyConfigured unless every keyword is non-empty, unique and
        separator-free and every ViewKind appears at most once."""
        if not self.separator:
            raise ImproperlyConfigured("Path table separator can't be empty.")
        errors = []
        for entry in self.entries:
            if not entry.keyword:
                errors.append("empty keyword")
            elif self.separator in entry.keyword:
                errors.append(f"keyword {entry.keyword!r} contains the separator {self.separator!r}")
            if ViewKinds.UNHANDLED in (entry.exact_kind, entry.prefix_kind):
                errors.append(f"keyword {entry.keyword!r} maps to {ViewKinds.UNHANDLED.label}")
        keyword_counts = Counter(entry.keyword for entry in self.entries)
        errors.extend(f"duplicate keyword {keyword!r}" for keyword, count in keyword_counts.items() if count > 1)
        kind_counts = Counter(
            kind for entry in self.entries for kind in (entry.exact_kind, entry.prefix_kind) if kind is not None
        )
        errors.extend(f"duplicate view kind {kind.label}" for kind, count in kind_counts.items() if count > 1)
        if errors:
            raise ImproperlyConfigured(f"Invalid path table: {', '.join(errors)}.")

    def match_exact(self, path: str) -> ViewKinds | None:
        return self.exact.get(path)

    def match_prefix(self, path: str) -> tuple[ViewKinds, str] | None:
        """Returns the ViewKind and the remainder for the first prefix, in table order,
        that the path starts with. The keyword must sit at the very start of the path,
        be followed immediately by the separator and leave a non-empty remainder."""
        for prefix, kind in self.prefixes:
            if path.startswith(prefix) and len(path) > len(prefix):
                return kind, path[len(prefix) :]
        return None

    def path_for(self, kind: ViewKinds, param: str = "") -> str:
        """Builds the route path that dispatches to kind, e.g. (TAG_ARTICLES, "golang") -> "tags/golang".

        Raises:
            KeyError: if kind has no entry in the table
            ValueError: if param is missing for a prefix kind, given for an exact kind or
                bounded by the separator, which dispatch would strip
        """
        keyword = self.keywords[kind]
        if self.exact.get(keyword) == kind:
            if param:
                raise ValueError(f"{kind.label} routes don't take a parameter.")
            return keyword
        if not param:
            raise ValueError(f"{kind.label} routes require a parameter.")
        if param.startswith(self.separator) or param.endswith(self.separator):
            raise ValueError(f"{kind.label} route parameter {param!r} can't start or end with {self.separator!r}.")
        return f"{keyword}{self.separator}{param}"

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)


PATH_ACTIVITIES = "activities"
PATH_ARCHIVES = "archives"
PATH_AUTHORS = "authors"
PATH_CATEGORIES = "categories"
PATH_TAGS = "tags"
PATH_COMMENTS = "comments"
PATH_ATOM = "atom"

PATH_TABLE = PathTable(
    [
        PathEntry(PATH_ACTIVITIES, ViewKinds.ACTIVITIES),
        PathEntry(PATH_ARCHIVES, ViewKinds.ARCHIVES, ViewKinds.ARCHIVE_ARTICLES),
        PathEntry(PATH_AUTHORS, ViewKinds.AUTHORS, ViewKinds.AUTHOR_ARTICLES),
        PathEntry(PATH_CATEGORIES, ViewKinds.CATEGORIES, ViewKinds.CATEGORY_ARTICLES),
        PathEntry(PATH_TAGS, ViewKinds.TAGS, ViewKinds.TAG_ARTICLES),
        PathEntry(PATH_COMMENTS, ViewKinds.COMMENTS, ViewKinds.COMMENT_REPLIES),
        PathEntry(PATH_ATOM, ViewKinds.ATOM_FEED),
    ]
)
