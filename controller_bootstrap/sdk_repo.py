"""Keep a cached clone of the aws-sdk-go repository.

The API model files are read from <cache>/src/aws-sdk-go/models/apis.
The clone happens once; later runs reuse it.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from .errors import RepositoryError

logger = logging.getLogger(__name__)

SDK_REPO_URL = "https://github.com/aws/aws-sdk-go"
DEFAULT_CACHE_DIR = Path.home() / ".cache" / "aws-controllers-k8s"
DEFAULT_CLONE_TIMEOUT = 180  # seconds


def clone_repository(path: Path, repository_url: str, timeout: float = DEFAULT_CLONE_TIMEOUT) -> None:
    """Clone a git repository into path, fetching all tags.

    Equivalent to `git clone --tags $repository_url $path`. A clone that does
    not finish, including one interrupted with Ctrl-C, is removed so the next
    run starts over instead of reusing it.
    """
    cmd = ["git", "clone", "--quiet", "--tags", repository_url, str(path)]
    cloned = False
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True, timeout=timeout)
        cloned = True
    except subprocess.TimeoutExpired as exc:
        raise RepositoryError(
            f"cannot clone repository {repository_url}: timed out after {timeout}s"
        ) from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"git exited with status {exc.returncode}"
        raise RepositoryError(f"cannot clone repository {repository_url}: {detail}") from exc
    except FileNotFoundError as exc:
        raise RepositoryError("cannot clone repository: git executable not found") from exc
    finally:
        if not cloned:
            shutil.rmtree(path, ignore_errors=True)


def ensure_sdk_repo(
    cache_dir: Path = DEFAULT_CACHE_DIR,
    repo_url: str = SDK_REPO_URL,
    timeout: float = DEFAULT_CLONE_TIMEOUT,
) -> Path:
    """Make sure a clone of aws-sdk-go exists in the cache and return its path."""
    src_path = Path(cache_dir) / "src"
    try:
        src_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RepositoryError(f"unable to create cache directory {src_path}: {exc}") from exc

    sdk_dir = src_path / "aws-sdk-go"
    if not sdk_dir.exists():
        logger.info("Cloning %s into %s", repo_url, sdk_dir)
        clone_repository(sdk_dir, repo_url, timeout=timeout)
    else:
        logger.debug("Using cached clone %s", sdk_dir)
    return sdk_dir


def model_root(sdk_dir: Path) -> Path:
    """Return the directory holding the per-service API models."""
    return Path(sdk_dir) / "models" / "apis"
