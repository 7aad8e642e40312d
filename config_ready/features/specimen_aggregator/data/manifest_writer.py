import os
import logging
from pathlib import Path
from typing import List

from ..domain.interfaces import IManifestWriter
from ..domain.models import AggregationConfig, Specimen

logger = logging.getLogger(__name__)

# Shared by the seed file and the manifest
FILE_HEADER = (
    "<?php declare(strict_types=1);\n"
    "\n"
    "// This file is generated by config-ready. Do not edit it by hand.\n"
)


def include_line(target_name: str) -> str:
    # Single-quoted PHP literal: only \ and ' need escaping
    literal = target_name.replace("\\", "\\\\").replace("'", "\\'")
    return f"require_once __DIR__ . '/{literal}';"


class PhpManifestWriter(IManifestWriter):
    def write(self, specimens: List[Specimen], destination: Path, config: AggregationConfig) -> Path:
        """
        Rewrites the whole manifest. Goes through a temp sibling + os.replace
        so a reader never sees half a file.

        Names from undecodable directory entries are written back as their
        original bytes (surrogateescape), matching the copied filenames.
        """
        manifest = destination / config.manifest_name
        tmp = manifest.with_name(manifest.name + ".tmp")

        content = FILE_HEADER
        if specimens:
            content += "\n" + "".join(f"{include_line(s.target_name)}\n" for s in specimens)

        try:
            tmp.write_bytes(content.encode("utf-8", errors="surrogateescape"))
            os.replace(tmp, manifest)
        finally:
            tmp.unlink(missing_ok=True)

        logger.info(f"Wrote manifest with {len(specimens)} include(s): {manifest}")
        return manifest
