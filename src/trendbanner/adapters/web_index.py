"""Add the banner script tag to the Jellyfin web client's ``index.html``.

The patch is applied at most once: a page that already mentions the plugin
marker is left untouched. Filesystem problems are logged and reported as an
outcome, never raised.
"""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)

PLUGIN_MARKER: Final[str] = "TrendingMoviesBanner"
SCRIPT_TAG: Final[str] = (
    '<script plugin="TrendingMoviesBanner" defer="defer" version="1.0.0.0" '
    'src="/TrendingMoviesBanner/script"></script>'
)
BODY_CLOSE_TAG: Final[str] = "</body>"
INDEX_FILENAME: Final[str] = "index.html"

DEFAULT_WEB_PATHS: Final[tuple[Path, ...]] = (
    Path("/jellyfin/jellyfin-web"),
    Path("/usr/share/jellyfin/web"),
    Path("/usr/lib/jellyfin/bin/jellyfin-web"),
)


class InjectionOutcome(StrEnum):
    INJECTED = "injected"
    ALREADY_PRESENT = "already_present"
    WEB_ROOT_NOT_FOUND = "web_root_not_found"
    INDEX_NOT_FOUND = "index_not_found"
    BODY_TAG_MISSING = "body_tag_missing"
    PERMISSION_DENIED = "permission_denied"
    FAILED = "failed"

    @property
    def succeeded(self) -> bool:
        return self in {InjectionOutcome.INJECTED, InjectionOutcome.ALREADY_PRESENT}


def find_web_root(
    web_path: Path | None = None,
    *,
    candidates: Iterable[Path] = DEFAULT_WEB_PATHS,
) -> Path | None:
    """Return the explicit web root if it exists, else the first existing candidate."""

    if web_path is not None:
        return web_path if web_path.is_dir() else None

    log.warning("Web path is not set. Trying common locations...")
    for candidate in candidates:
        if candidate.is_dir():
            log.info("Found web path at: %s", candidate)
            return candidate
    return None


def patch_index_html(content: str) -> str | None:
    """Return ``content`` with the script tag before ``</body>``, or None without one."""

    if BODY_CLOSE_TAG not in content:
        return None
    return content.replace(BODY_CLOSE_TAG, f"{SCRIPT_TAG}\n{BODY_CLOSE_TAG}", 1)


def inject_client_script(
    web_path: Path | None = None,
    *,
    candidates: Iterable[Path] = DEFAULT_WEB_PATHS,
) -> InjectionOutcome:
    web_root = find_web_root(web_path, candidates=candidates)
    if web_root is None:
        log.warning(
            "Could not find jellyfin-web directory. Client script injection skipped. "
            "Users must manually add the script tag."
        )
        return InjectionOutcome.WEB_ROOT_NOT_FOUND

    index_path = web_root / INDEX_FILENAME
    if not index_path.is_file():
        log.warning("index.html not found at %s", index_path)
        return InjectionOutcome.INDEX_NOT_FOUND

    try:
        content = index_path.read_text(encoding="utf-8")
        if PLUGIN_MARKER in content:
            log.info("Client script already injected in %s", index_path)
            return InjectionOutcome.ALREADY_PRESENT

        patched = patch_index_html(content)
        if patched is None:
            log.warning("Could not find </body> tag in %s", index_path)
            return InjectionOutcome.BODY_TAG_MISSING

        index_path.write_text(patched, encoding="utf-8")
    except PermissionError:
        log.exception(
            "Permission denied when trying to inject client script. "
            "Please ensure write access to %s",
            index_path,
        )
        return InjectionOutcome.PERMISSION_DENIED
    except OSError:
        log.exception("Error injecting client script into %s", index_path)
        return InjectionOutcome.FAILED

    log.info("Successfully injected client script into %s", index_path)
    return InjectionOutcome.INJECTED
