"""Day scaffolding: copy ``skeleton/`` into a fresh day folder.

The manifest at the top of the skeleton gets its ``[package] name`` set to
the day name on the way through; everything else is copied verbatim.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import InlineTable, Table

from aocprep.config import settings
from aocprep.day import RunContext
from aocprep.errors import AocPrepError, ErrorKind

logger = logging.getLogger(__name__)


def expand_manifest(run: RunContext, src: Path, dst: Path) -> None:
    """Copy the manifest *src* to *dst* with ``package.name`` set to the day name."""
    logger.info("Expanding %s with day name", src.name)
    try:
        doc = tomlkit.parse(src.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise AocPrepError(ErrorKind.IO, f"Unable to read {str(src)!r}: {exc}") from exc
    except TOMLKitError as exc:
        raise AocPrepError(ErrorKind.IO, f"While reading {str(src)!r}: {exc}") from exc

    package = doc.get("package")
    if package is None:
        package = tomlkit.table()
        doc["package"] = package
    elif not isinstance(package, (Table, InlineTable)):
        raise AocPrepError(
            ErrorKind.IO, f"While reading {str(src)!r}: 'package' is not a table"
        )
    package["name"] = run.day_name

    try:
        dst.write_text(tomlkit.dumps(doc), encoding="utf-8")
    except OSError as exc:
        raise AocPrepError(ErrorKind.IO, f"Unable to write {str(dst)!r}: {exc}") from exc


def copy_dir_recursive(
    run: RunContext,
    src: Path,
    dst: Path,
    do_expand_manifest: bool = False,
) -> None:
    """Copy *src* into *dst*, expanding the manifest only at this level."""
    try:
        dst.mkdir(parents=True, exist_ok=True)
        entries = sorted(src.iterdir())
    except OSError as exc:
        raise AocPrepError(ErrorKind.IO, f"Unable to copy {str(src)!r}: {exc}") from exc

    for entry in entries:
        target = dst / entry.name
        if entry.is_dir():
            copy_dir_recursive(run, entry, target)
        elif do_expand_manifest and entry.name == settings.manifest_filename:
            expand_manifest(run, entry, target)
        else:
            try:
                shutil.copy2(entry, target)
            except OSError as exc:
                raise AocPrepError(
                    ErrorKind.IO, f"Unable to copy {str(entry)!r}: {exc}"
                ) from exc


def copy_skeleton(run: RunContext) -> bool:
    """Create the day folder from the skeleton unless it already exists.

    Returns ``True`` if a new folder was created.  A failure half-way
    through leaves the partial copy in place.
    """
    # Validates the day name before anything touches the disk.
    run.day_number

    day_folder = run.day_folder
    if day_folder.exists():
        logger.info("Day folder %s exists, not copying skeleton", day_folder)
        return False

    skeleton = run.skeleton_folder
    if not skeleton.is_dir():
        raise AocPrepError(ErrorKind.IO, f"Skeleton folder {str(skeleton)!r} not found")

    logger.info(
        "No day folder exists for %s, will copy skeleton with %s expansion",
        run.day_name,
        settings.manifest_filename,
    )
    copy_dir_recursive(run, skeleton, day_folder, do_expand_manifest=True)
    return True
