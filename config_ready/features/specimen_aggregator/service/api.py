from pathlib import Path
from typing import Optional, Union

from config_ready.core.common.enums import LayoutConvention
from config_ready.core.config.settings import settings
from ..domain.models import AggregationConfig, AggregationRequest, AggregationSummary
from .aggregator import SpecimenAggregator, delete_caller

__all__ = ["run", "delete_caller", "aggregator"]

def run(
    root_path: Union[str, Path, None] = None,
    layout: Optional[LayoutConvention] = None,
    caller_path: Union[str, Path, None] = None,
) -> AggregationSummary:
    """
    Standalone API: aggregates specimens of the project at root_path.
    Falls back to settings for anything not given.
    """
    request = AggregationRequest(
        root_path=Path(root_path) if root_path is not None else settings.ROOT_DIR,
        config=AggregationConfig.for_layout(layout or settings.layout),
        caller_path=Path(caller_path) if caller_path is not None else None,
    )
    return aggregator.run(request)

# Singleton Instance for easy import
aggregator = SpecimenAggregator()
