import logging
from pathlib import Path
from typing import Union

from ..domain.models import AggregationRequest, AggregationSummary
from ..data.specimen_finder import VendorTreeFinder
from ..data.local_store import LocalSpecimenStore
from ..data.manifest_writer import PhpManifestWriter

logger = logging.getLogger(__name__)


def delete_caller(caller_path: Union[str, Path]) -> bool:
    """
    Removes the one-shot trigger script so it doesn't re-run the aggregator
    on every start. Missing file is a no-op.
    """
    caller_path = Path(caller_path)
    if not caller_path.is_file():
        return False
    caller_path.unlink()
    logger.info(f"Deleted caller {caller_path}")
    return True


class SpecimenAggregator:
    """
    Facade for the Specimen Aggregator feature.
    Orchestrates discovery, copying and the includes manifest.
    """

    def __init__(self):
        self.finder = VendorTreeFinder()
        self.store = LocalSpecimenStore()
        self.manifest = PhpManifestWriter()

    def run(self, request: AggregationRequest) -> AggregationSummary:
        """
        - Creates the destination dir (and seed file).
        - Finds every specimen.
        - Copies the ones whose target doesn't exist yet.
        - Rewrites the manifest.
        - Deletes the caller, only once all of the above succeeded.

        Any OSError aborts the run; there is no partial-success mode.
        """
        config = request.config
        destination = request.destination_dir
        summary = AggregationSummary()

        logger.info(f"Aggregating specimens under {request.root_path}")

        try:
            # 1. Bootstrap
            self.store.ensure_destination(destination, config)

            # 2. Discover
            summary.specimens = self.finder.find(request.root_path, config)

            # 3. Copy
            for specimen in summary.specimens:
                if self.store.install(specimen, destination):
                    summary.copied.append(specimen.target_name)
                else:
                    summary.skipped.append(specimen.target_name)

            # 4. Manifest
            if config.write_manifest:
                summary.manifest_path = self.manifest.write(summary.specimens, destination, config)

        except OSError as e:
            logger.error(f"Aggregation failed: {e}")
            raise

        # 5. One-shot trigger
        if request.caller_path is not None:
            summary.caller_deleted = delete_caller(request.caller_path)

        logger.info(
            f"Aggregation complete. Found {len(summary.specimens)}, "
            f"copied {len(summary.copied)}, kept {len(summary.skipped)}."
        )
        return summary
