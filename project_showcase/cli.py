"""
cli.py

Responsibility: CLI entrypoint for project-showcase.

High-level flow (single command `build`):
1) Load projects file -> `ProjectConfig` list
2) Fetch each repository from the GitHub REST API, one at a time
3) Sort successful fetches by last update (most recent first)
4) Load page template, extract the item template
5) Render items, splice them into the page, write the output file

Per-repository fetch failures are collected and reported; they never stop the
run. Configuration, template and rendering errors are fatal.

This module should orchestrate behavior but keep concerns isolated:
- Projects file: `config.py`
- GitHub API: `github_client.py`
- Page template: `template.py`
- Item rendering: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from project_showcase.config import ConfigError, load_projects
from project_showcase.github_client import API_BASE, GitHubClient, GitHubError, RepositoryMetadata
from project_showcase.renderer import RenderError, render_items
from project_showcase.template import TemplateError, assemble_page, load_page_template

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "projects.json"
DEFAULT_TEMPLATE = str(Path("templates") / "projects-template.html")
DEFAULT_OUTPUT = str(Path("site") / "projects.html")


class CLIError(RuntimeError):
    pass


@dataclass(frozen=True)
class FetchError:
    repository: str
    message: str


@dataclass
class GenerationResult:
    projects: list[RepositoryMetadata] = field(default_factory=list)
    errors: list[FetchError] = field(default_factory=list)
    output_path: Path | None = None


def fetch_all(client: GitHubClient, config_path: str | Path) -> GenerationResult:
    """
    Fetch every configured repository in order.

    Failures are recorded on the result and the loop moves on to the next entry.
    """
    result = GenerationResult()
    for project in load_projects(config_path):
        logger.info("Fetching %s...", project.full_name)
        try:
            result.projects.append(client.get_repo(project.owner, project.repo))
        except GitHubError as e:
            logger.error("Error fetching %s: %s", project.full_name, e)
            result.errors.append(FetchError(repository=project.full_name, message=str(e)))
    return result


def sort_by_updated(projects: list[RepositoryMetadata]) -> list[RepositoryMetadata]:
    # sorted() is stable with reverse=True: ties keep fetch order.
    return sorted(projects, key=lambda p: p.updated_at, reverse=True)


def _write_output(output_path: Path, content: str) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8", newline="\n")
    except OSError as e:
        raise CLIError(f"Could not write {output_path}: {e}") from e


def generate(
    *,
    client: GitHubClient,
    config_path: str | Path,
    template_path: str | Path,
    output_path: str | Path,
    escape_url: bool = False,
) -> GenerationResult:
    logger.info("Fetching project details from GitHub...")
    result = fetch_all(client, config_path)

    if result.errors:
        logger.warning("Some projects failed to fetch:")
        for err in result.errors:
            logger.warning("  - %s: %s", err.repository, err.message)

    if not result.projects:
        logger.info("No projects to display.")
        return result

    result.projects = sort_by_updated(result.projects)

    page = load_page_template(template_path)
    items = render_items(result.projects, page.item_template, escape_url=escape_url)
    content = assemble_page(page, items)

    out = Path(output_path)
    _write_output(out, content)
    result.output_path = out

    logger.info("Successfully generated projects page with %d project(s)", len(result.projects))
    logger.info("Created %s", out)
    return result


def build_cmd(args: argparse.Namespace) -> int:
    token = args.github_token or os.environ.get("GITHUB_TOKEN") or None
    client = GitHubClient(token, api_base=args.api_base)
    if not client.authenticated:
        logger.debug("No GitHub token set; using unauthenticated requests")

    generate(
        client=client,
        config_path=args.config,
        template_path=args.template,
        output_path=args.output,
        escape_url=bool(args.escape_urls),
    )
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="project-showcase",
        description="Generate a static projects page from GitHub repository metadata",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="Fetch configured repositories and write the projects page")
    b.add_argument("--config", default=DEFAULT_CONFIG, help=f"Projects file, JSON or YAML (default: {DEFAULT_CONFIG})")
    b.add_argument("--template", default=DEFAULT_TEMPLATE, help=f"Page template (default: {DEFAULT_TEMPLATE})")
    b.add_argument("--output", default=DEFAULT_OUTPUT, help=f"Output HTML file (default: {DEFAULT_OUTPUT})")
    b.add_argument("--github-token", default=None, help="GitHub token (or set env GITHUB_TOKEN)")
    b.add_argument("--api-base", default=API_BASE, help=f"GitHub API root (default: {API_BASE})")
    b.add_argument(
        "--escape-urls",
        action="store_true",
        help="HTML-escape repository URLs as well (by default URLs are inserted as returned by the API)",
    )

    b.set_defaults(func=build_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        return int(args.func(args))
    except (ConfigError, TemplateError, RenderError, CLIError) as e:
        logger.error("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
