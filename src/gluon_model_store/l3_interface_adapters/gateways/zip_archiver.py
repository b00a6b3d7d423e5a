"""Gateway: zip archive extraction — implements Archiver port."""

from __future__ import annotations

import logging
import os
import shutil
import uuid
import zipfile
from pathlib import Path, PurePosixPath

from gluon_model_store.l1_entities.errors import ArchiveError
from gluon_model_store.l1_entities.model_registry import PARAMS_SUFFIX

log = logging.getLogger('gms.archive')


class ZipArchiver:
    """Extracts the single parameter file of a model zip to an exact target path."""

    def extract(self, archive_path: Path, target_path: Path) -> Path:
        target_path = Path(target_path)
        try:
            with zipfile.ZipFile(archive_path) as zf:
                entry = _pick_entry(zf, target_path.name)
                log.debug('Extracting %s from %s', entry.filename, archive_path)
                target_path.parent.mkdir(parents=True, exist_ok=True)
                # One temp sibling per writer; open() honours the umask.
                tmp_path = target_path.with_name(f'.{target_path.name}.{uuid.uuid4().hex[:12]}.tmp')
                try:
                    with tmp_path.open('xb') as dst, zf.open(entry) as src:
                        shutil.copyfileobj(src, dst)
                    os.replace(tmp_path, target_path)
                except BaseException:
                    tmp_path.unlink(missing_ok=True)
                    raise
        except zipfile.BadZipFile as e:
            raise ArchiveError(f'{archive_path} is not a valid zip archive: {e}') from e
        except OSError as e:
            raise ArchiveError(f'Failed to extract {archive_path}: {e}') from e
        return target_path


def _pick_entry(zf: zipfile.ZipFile, target_name: str) -> zipfile.ZipInfo:
    """Entry whose basename equals *target_name*, else the only ``.params`` entry."""
    candidates = [
        info for info in zf.infolist() if not info.is_dir() and PurePosixPath(info.filename).suffix == PARAMS_SUFFIX
    ]
    for info in candidates:
        if PurePosixPath(info.filename).name == target_name:
            return info
    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise ArchiveError(f'No {PARAMS_SUFFIX} file found in {zf.filename}')
    names = ', '.join(info.filename for info in candidates)
    raise ArchiveError(f'Ambiguous archive {zf.filename}: several {PARAMS_SUFFIX} entries ({names})')
