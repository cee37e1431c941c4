from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from http_toolkit.domain.files.interfaces import UploadPart


@dataclass(frozen=True)
class UploadFilesInputDTO:
    parts: Sequence[UploadPart]
    upload_dir: Path
    rename: bool = True
