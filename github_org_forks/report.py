"""Markdown report of organization-owned forks."""

from pathlib import Path

from .errors import ReportWriteError
from .models import OrgFork
from .utils import escape_table_cell

DEFAULT_REPORTS_DIR = Path("reports")


def default_report_path(repo: str, reports_dir: Path = DEFAULT_REPORTS_DIR) -> Path:
    """reports/<repo>_forks.md, creating the directory if needed."""
    try:
        reports_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ReportWriteError(reports_dir, e.strerror or str(e)) from e
    return reports_dir / f"{repo}_forks.md"


def write_report(path: Path, owner: str, repo: str, forks: list[OrgFork]) -> None:
    lines = [
        f"# Organization-owned forks for {owner}/{repo}",
        "",
        "| Organization | Fork Name | URL |",
        "|--------------|----------|-----|",
    ]
    for fork in forks:
        cells = (fork.org_login, fork.fork_name, fork.fork_url)
        lines.append("| " + " | ".join(escape_table_cell(c) for c in cells) + " |")

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    except OSError as e:
        raise ReportWriteError(path, e.strerror or str(e)) from e
