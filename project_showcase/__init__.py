"""
project_showcase package

Generates a static projects page from GitHub repository metadata.

Key responsibilities are split across modules:
- `config.py`: load the list of repositories (JSON or YAML) into typed records
- `github_client.py`: isolated GitHub REST API interactions (repository lookup)
- `template.py`: locate the example item between the page markers and splice results back
- `renderer.py`: fill one item template per repository, with HTML escaping
- `cli.py`: CLI entrypoint and orchestration (load -> fetch -> sort -> render -> write)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
