"""ltd-calc SDK - Core functionality for company take-home and pension projections."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_profile_path,
    load_profile,
    save_profile,
    get_profile_value,
    set_profile_value,
    validate_profile,
    load_profile_defaults,
    build_scenario_input,
    ProfileNotFoundError,
    ProfileValidationError,
)

from .schemas import (
    ScenarioInput,
    ScenarioResult,
    ScenarioSet,
    ProjectionRow,
    PensionProjection,
    Strategy,
    ProfileDefaults,
    PensionDefaults,
)

from .inputs import (
    coerce_amount,
    working_days,
    from_day_rate,
    from_annual_turnover,
    apply_pension_target,
)

from .scenario import (
    PENSION_PRESETS,
    run_scenario,
    run_scenario_set,
    run_scenario_input,
    run_scenario_set_for,
)

from .projection import (
    PROJECTION_YEARS,
    MILLION_MILESTONE,
    project_pension,
)

from .strategies import (
    STRATEGIES,
    StrategyDescriptor,
    optimise,
    get_strategy,
)

from . import taxes

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "get_profile_value",
    "set_profile_value",
    "validate_profile",
    "load_profile_defaults",
    "build_scenario_input",
    "ProfileNotFoundError",
    "ProfileValidationError",
    # Schemas
    "ScenarioInput",
    "ScenarioResult",
    "ScenarioSet",
    "ProjectionRow",
    "PensionProjection",
    "Strategy",
    "ProfileDefaults",
    "PensionDefaults",
    # Inputs
    "coerce_amount",
    "working_days",
    "from_day_rate",
    "from_annual_turnover",
    "apply_pension_target",
    # Scenarios
    "PENSION_PRESETS",
    "run_scenario",
    "run_scenario_set",
    "run_scenario_input",
    "run_scenario_set_for",
    # Projection
    "PROJECTION_YEARS",
    "MILLION_MILESTONE",
    "project_pension",
    # Strategies
    "STRATEGIES",
    "StrategyDescriptor",
    "optimise",
    "get_strategy",
    # Tax calculators
    "taxes",
]
