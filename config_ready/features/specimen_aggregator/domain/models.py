from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from config_ready.core.common.enums import LayoutConvention

TARGET_MARKER = "config"
MAIN_ID = "main"


def build_target_name(group_id: str, sub_id: str, extension: str = "php") -> str:
    """
    Deterministic destination filename for a (group, package) pair.
    e.g. ("acme", "widget") -> ".config.acme.widget.php"
    """
    return f".{TARGET_MARKER}.{group_id}.{sub_id}.{extension}"


@dataclass(frozen=True)
class AggregationConfig:
    """
    Where specimens live inside a package and what gets produced.
    """
    specimen_path: Path
    destination_name: str = "config"
    vendor_name: str = "vendor"
    write_manifest: bool = False
    extension: str = "php"

    @classmethod
    def for_layout(cls, layout: LayoutConvention) -> "AggregationConfig":
        if layout == LayoutConvention.LEGACY:
            return cls(specimen_path=Path("config") / "specimen.php")
        return cls(
            specimen_path=Path("resources") / "configSpecimen.php",
            write_manifest=True,
        )

    @property
    def seed_name(self) -> str:
        return f".{TARGET_MARKER}.{self.extension}"

    @property
    def manifest_name(self) -> str:
        return f".{TARGET_MARKER}.includes.{self.extension}"


@dataclass(frozen=True)
class Specimen:
    """
    A package-provided configuration template found during discovery.
    """
    origin_path: Path
    group_id: str
    sub_id: str
    target_name: str

    @classmethod
    def create(cls, origin_path: Path, group_id: str, sub_id: str, extension: str = "php") -> "Specimen":
        return cls(
            origin_path=origin_path,
            group_id=group_id,
            sub_id=sub_id,
            target_name=build_target_name(group_id, sub_id, extension),
        )


@dataclass(frozen=True)
class AggregationRequest:
    """
    User intent to aggregate specimens of one project tree.
    """
    root_path: Path
    config: AggregationConfig
    caller_path: Optional[Path] = None

    def __post_init__(self):
        if not self.root_path.exists():
            raise FileNotFoundError(f"Project root not found: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Project root is not a directory: {self.root_path}")

    @property
    def destination_dir(self) -> Path:
        return self.root_path / self.config.destination_name


@dataclass
class AggregationSummary:
    """
    Report returned after a run completes.
    """
    specimens: List[Specimen] = field(default_factory=list)
    copied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    manifest_path: Optional[Path] = None
    caller_deleted: bool = False


class SpecimenScanError(OSError):
    """Raised when a directory of the vendor tree cannot be listed."""
