import shutil
import logging
from pathlib import Path

from ..domain.interfaces import ISpecimenStore
from ..domain.models import AggregationConfig, Specimen
from .manifest_writer import FILE_HEADER

logger = logging.getLogger(__name__)

class LocalSpecimenStore(ISpecimenStore):
    def ensure_destination(self, destination: Path, config: AggregationConfig) -> None:
        destination.mkdir(parents=True, exist_ok=True)

        if not config.write_manifest:
            return

        # Seed so the app can require it before any specimen shows up
        seed = destination / config.seed_name
        try:
            with open(seed, "x", encoding="utf-8") as f:
                f.write(FILE_HEADER)
            logger.info(f"Seeded {seed}")
        except FileExistsError:
            pass

    def install(self, specimen: Specimen, destination: Path) -> bool:
        """
        Copies the specimen byte-for-byte to destination/target_name.
        Exclusive create: an existing target is never touched, and two
        concurrent runs can't both write it.
        """
        target = destination / specimen.target_name

        try:
            dst = open(target, "xb")
        except FileExistsError:
            logger.debug(f"Keeping existing {target}")
            return False

        try:
            with dst, open(specimen.origin_path, "rb") as src:
                shutil.copyfileobj(src, dst)
        except OSError:
            # A partial file would be kept forever by the existence check
            target.unlink(missing_ok=True)
            raise

        logger.info(f"Copied {specimen.origin_path} -> {target}")
        return True
