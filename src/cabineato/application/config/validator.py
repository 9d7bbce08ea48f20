"""Full configuration validation.

Runs every domain validator unconditionally and in a fixed order, then adds
the feature-combination warnings. Validation never raises: a validator that
fails unexpectedly is reported as an error entry.
"""

from __future__ import annotations

import logging

from cabineato.application.config.schema import AssemblyConfig
from cabineato.application.config.validators import (
    BackPanelValidator,
    CarcassValidator,
    DrawerValidator,
    PredrillValidator,
    ShelfValidator,
    ValidationResult,
)
from cabineato.contracts import Validator

logger = logging.getLogger(__name__)

DEFAULT_VALIDATORS: tuple[Validator, ...] = (
    CarcassValidator(),
    BackPanelValidator(),
    ShelfValidator(),
    DrawerValidator(),
    PredrillValidator(),
)


def check_feature_combinations(config: AssemblyConfig) -> ValidationResult:
    """Warn about feature combinations that are legal but risky to build."""
    result = ValidationResult()
    features = config.features
    adjustable = features.shelves.adjustable.enabled

    if adjustable and features.drawers.enabled:
        result.add_warning(
            "features",
            "Both shelves and drawers are enabled. Shelf pin holes will be generated "
            "but may interfere with drawer slides.",
            suggestion="Disable adjustable shelves or drawers",
        )
    if adjustable and features.shelves.fixed.enabled:
        result.add_warning(
            "features.shelves",
            "Both adjustable and fixed shelves are enabled. Shelf pin holes may "
            "break into the fixed shelf dados.",
            suggestion="Use one shelf system per cabinet",
        )
    return result


def validate_config(
    config: AssemblyConfig,
    validators: tuple[Validator, ...] = DEFAULT_VALIDATORS,
) -> ValidationResult:
    """Validate a configuration for physical feasibility.

    Args:
        config: The configuration to validate.
        validators: Validators to run, in order.

    Returns:
        ValidationResult with every error and warning found.
    """
    result = ValidationResult()
    for validator in validators:
        logger.debug(f"Running validator '{validator.name}'")
        try:
            result.merge(validator.validate(config))
        except Exception as e:
            logger.error(f"Validator '{validator.name}' raised an exception: {e}")
            result.add_error(
                path="validation",
                message=f"Validator '{validator.name}' failed: {e}",
            )
    result.merge(check_feature_combinations(config))
    return result
