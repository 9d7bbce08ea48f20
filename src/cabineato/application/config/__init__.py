"""Configuration schema, loading and validation for cabinet assemblies.

Public API:
    - AssemblyConfig: Root configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a mapping
    - migrate_legacy_shelves: Rewrite the flat legacy shelf shape
    - ConfigError: Exception for configuration loading errors
    - ValidationResult: Container for validation results
    - validate_config: Run every feasibility check

Example:
    >>> from pathlib import Path
    >>> from cabineato.application.config import load_config, validate_config
    >>>
    >>> config = load_config(Path("base-cabinet.json"))
    >>> validate_config(config).is_valid
    True
"""

from .adapter import migrate_legacy_shelves
from .loader import ConfigError, load_config, load_config_from_dict
from .schema import (
    AdjustableShelfConfig,
    AssemblyConfig,
    AssemblyPredrillConfig,
    BackPanelConfig,
    DrawerConfig,
    DrawerPullConfig,
    FeaturesConfig,
    FixedShelfConfig,
    GlobalBoundsConfig,
    MachiningConfig,
    MaterialConfig,
    PredrillsConfig,
    SecondaryMaterialConfig,
    ShelfRunnerConfig,
    ShelvesConfig,
    SlidePredrillConfig,
    ToeKickConfig,
)
from .validator import check_feature_combinations, validate_config
from .validators import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "AdjustableShelfConfig",
    "AssemblyConfig",
    "AssemblyPredrillConfig",
    "BackPanelConfig",
    "ConfigError",
    "DrawerConfig",
    "DrawerPullConfig",
    "FeaturesConfig",
    "FixedShelfConfig",
    "GlobalBoundsConfig",
    "MachiningConfig",
    "MaterialConfig",
    "PredrillsConfig",
    "SecondaryMaterialConfig",
    "ShelfRunnerConfig",
    "ShelvesConfig",
    "SlidePredrillConfig",
    "ToeKickConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_feature_combinations",
    "load_config",
    "load_config_from_dict",
    "migrate_legacy_shelves",
    "validate_config",
]
