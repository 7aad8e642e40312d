# File: config_ready/core/common/enums.py

from enum import Enum, unique

@unique
class LayoutConvention(str, Enum):
    LEGACY = "legacy"          # config/specimen.php, no manifest
    RESOURCES = "resources"    # resources/configSpecimen.php + includes manifest
