from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from .models import AggregationConfig, Specimen

class ISpecimenFinder(ABC):
    """
    Contract for locating specimens inside a project tree.
    """
    @abstractmethod
    def find(self, root: Path, config: AggregationConfig) -> List[Specimen]:
        """
        Returns specimens in discovery order, at most one per target name.
        Raises SpecimenScanError if the vendor tree cannot be listed.
        """
        pass

class ISpecimenStore(ABC):
    @abstractmethod
    def ensure_destination(self, destination: Path, config: AggregationConfig) -> None:
        """Creates the destination dir (and seed file for manifest layouts)."""
        pass

    @abstractmethod
    def install(self, specimen: Specimen, destination: Path) -> bool:
        """
        Copies the specimen to destination/target_name unless it already exists.
        Returns True if a copy was made.
        """
        pass

class IManifestWriter(ABC):
    @abstractmethod
    def write(self, specimens: List[Specimen], destination: Path, config: AggregationConfig) -> Path:
        """Rewrites the includes manifest and returns its path."""
        pass
