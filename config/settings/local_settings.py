"""Per-branch development database. The post-checkout git hook rewrites BRANCH
so that each branch migrates its own sqlite file."""

from pathlib import Path

# BRANCH will be updated by post-checkout git hook.
BRANCH = "main"


def branch_database_name(branch: str | None, base_dir: Path) -> str:
    return str(base_dir / f"pipeblog_{branch or 'development'}.sqlite3")


def get_additional_local_settings(BRANCH, DATABASES, BASE_DIR, **kwargs):
    for database in DATABASES.values():
        if database["ENGINE"].endswith("sqlite3"):
            database["NAME"] = branch_database_name(BRANCH, BASE_DIR)

    return {
        "DATABASES": DATABASES,
    }
