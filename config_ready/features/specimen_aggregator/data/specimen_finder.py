import os
import logging
from pathlib import Path
from typing import Dict, Iterator, List

from ..domain.interfaces import ISpecimenFinder
from ..domain.models import MAIN_ID, AggregationConfig, Specimen, SpecimenScanError

logger = logging.getLogger(__name__)

class VendorTreeFinder(ISpecimenFinder):
    """
    Walks vendor/<group>/<package>/ two levels deep, plus the project's own
    specimen at the root.
    """

    def find(self, root: Path, config: AggregationConfig) -> List[Specimen]:
        # Keyed by target name, insertion order = discovery order
        found: Dict[str, Specimen] = {}

        for group_dir in self._list_dirs(root / config.vendor_name):
            for package_dir in self._list_dirs(group_dir):
                location = package_dir / config.specimen_path
                if not location.is_file():
                    logger.debug(f"No specimen in {package_dir}")
                    continue

                self._record(found, Specimen.create(
                    origin_path=location,
                    group_id=group_dir.name,
                    sub_id=package_dir.name,
                    extension=config.extension,
                ))

        main_location = root / config.specimen_path
        if main_location.is_file():
            self._record(found, Specimen.create(main_location, MAIN_ID, MAIN_ID, config.extension))

        return list(found.values())

    def _record(self, found: Dict[str, Specimen], specimen: Specimen) -> None:
        existing = found.get(specimen.target_name)
        if existing is not None:
            logger.warning(
                f"Target {specimen.target_name} already claimed by {existing.origin_path}; "
                f"ignoring {specimen.origin_path}"
            )
            return
        found[specimen.target_name] = specimen

    def _list_dirs(self, directory: Path) -> Iterator[Path]:
        """
        Yields immediate subdirectories in listing order (not sorted).
        """
        try:
            with os.scandir(directory) as entries:
                # Materialize so the handle closes before callers descend
                dirs = [Path(entry.path) for entry in entries if entry.is_dir()]
        except OSError as e:
            raise SpecimenScanError(e.errno, f"Cannot list directory: {e.strerror}", str(directory)) from e
        yield from dirs
