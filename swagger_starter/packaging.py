"""
Package staging — copies generated files from option subtrees into `package/`.

A staging root looks like:

    <root>/server/src/sampleSwagger.json     (written by the caller)
    <root>/package/src/sampleSwagger.json    (written by prepare_packages)

Every file under `<root>/<option>` is copied byte-for-byte to the same
relative location with the `<option>` segment replaced by `package`.
Callers use a fresh root per request (the app accelerator puts a UUID in the
path), so concurrent requests never share a root.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from swagger_starter.config import PACKAGE_SEGMENT, get_staging_base

logger = logging.getLogger(__name__)

SUCCESS = "success"
FAILURE = "failure"

INVALID_REQUEST = "invalid_request"
IO_ERROR = "io_error"

_SEPARATORS = re.compile(r"[\\/]+")


class StagingError(ValueError):
    """Raised when a staging request cannot be carried out as given."""


@dataclass
class StagingResult:
    status: str
    staged: List[str] = field(default_factory=list)
    message: str = ""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS

    def to_dict(self) -> dict:
        return {"status": self.status, "staged": list(self.staged),
                "message": self.message, "reason": self.reason}


def split_segments(path: str) -> List[str]:
    """Split on both separator styles, dropping empty components."""
    return [p for p in _SEPARATORS.split(path) if p]


def replace_segment(path: str, old: str, new: str) -> str:
    """Replace the first path component equal to `old` with `new`.

    Components are split on `/` and `\\` and rejoined with `/`; a leading
    separator is kept. Raises ValueError when no component equals `old`.
    """
    anchor = "/" if path[:1] in ("/", "\\") else ""
    parts = split_segments(path)
    try:
        idx = parts.index(old)
    except ValueError:
        raise ValueError(f"no {old!r} segment in {path!r}") from None
    parts[idx] = new
    return anchor + "/".join(parts)


def parse_options(options: Optional[str]) -> List[str]:
    tokens: List[str] = []
    for raw in (options or "").split(","):
        token = raw.strip()
        if not token or token in tokens:
            continue
        if token in (".", "..", PACKAGE_SEGMENT) or split_segments(token) != [token]:
            raise StagingError(f"invalid option {token!r}")
        tokens.append(token)
    if not tokens:
        raise StagingError("no options given")
    return tokens


def package_path_for(root: Path, source_file: Path, token: str) -> Path:
    """Where `source_file` (under `root/token`) is staged."""
    relative = source_file.relative_to(root).as_posix()
    if split_segments(relative)[0] != token:
        raise StagingError(f"{source_file} is not under the {token!r} subtree")
    return root.joinpath(*split_segments(replace_segment(relative, token, PACKAGE_SEGMENT)))


def _check_within_base(path: Path, what: str) -> Path:
    """Resolve `path` (following symlinks) and require it to lie under the staging base."""
    resolved = path.resolve()
    base = get_staging_base()
    if base is not None:
        try:
            resolved.relative_to(base)
        except ValueError:
            raise StagingError(f"{what} {resolved} is outside {base}") from None
    return resolved


def _resolve_root(root: Union[str, Path]) -> Path:
    if not str(root).strip():
        raise StagingError("no staging path given")
    path = Path(root).expanduser()
    if not path.is_dir():
        raise StagingError(f"staging path {path} does not exist or is not a directory")
    return _check_within_base(path, "staging path")


def _source_dir(root: Path, token: str) -> Path:
    source = root / token
    if not source.is_dir():
        raise StagingError(f"nothing to package: {source} does not exist")
    _check_within_base(source, "source")
    return source


def _raise(error: OSError) -> None:
    raise error


def _walk_files(source: Path) -> List[Path]:
    """Every regular file under `source`, sorted. Unlistable directories raise OSError."""
    found: List[Path] = []
    for dirpath, _dirnames, filenames in os.walk(source, onerror=_raise):
        found.extend(p for p in (Path(dirpath) / name for name in filenames) if p.is_file())
    return sorted(found)


def _copy_into_place(src: Path, dest: Path) -> None:
    # dest is either left untouched or fully replaced, never truncated
    tmp = dest.with_name(f".{dest.name}.{uuid.uuid4().hex}.tmp")
    try:
        shutil.copy2(src, tmp)
        os.replace(tmp, dest)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def prepare_packages(root: Union[str, Path], options: Optional[str]) -> StagingResult:
    """Stage every file under `root/<option>` into `root/package`.

    Never raises for bad input or I/O problems; the returned result carries
    status "failure" and a message instead. Each file is replaced atomically,
    but files staged before a failure stay in place and are listed in
    `staged`.
    """
    try:
        root_dir = _resolve_root(root)
        tokens = parse_options(options)
        sources = [(token, _source_dir(root_dir, token)) for token in tokens]
    except StagingError as e:
        logger.warning("rejected staging request path=%s options=%s: %s", root, options, e)
        return StagingResult(FAILURE, message=str(e), reason=INVALID_REQUEST)

    staged: List[str] = []
    try:
        for token, source in sources:
            for src in _walk_files(source):
                _check_within_base(src, "source file")
                dest = package_path_for(root_dir, src, token)
                _check_within_base(dest, "destination")
                dest.parent.mkdir(parents=True, exist_ok=True)
                _copy_into_place(src, dest)
                staged.append(dest.relative_to(root_dir).as_posix())
    except StagingError as e:
        logger.warning("refused to stage under %s after %d file(s): %s", root_dir, len(staged), e)
        return StagingResult(FAILURE, staged, str(e), INVALID_REQUEST)
    except OSError as e:
        logger.error("staging failed under %s after %d file(s): %s", root_dir, len(staged), e)
        return StagingResult(FAILURE, staged, f"unable to stage files: {e}", IO_ERROR)

    logger.info("staged %d file(s) under %s for %s", len(staged), root_dir, ",".join(tokens))
    return StagingResult(SUCCESS, staged, f"staged {len(staged)} file(s)")
