"""emp-comp SDK - Compensation engine and its boundaries."""

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
    ProfileValidationError,
    SettingsError,
    get_data_path,
    get_log_path,
    get_prompt_defaults,
)

from .employee import (
    Classification,
    EmployeeRecord,
    sanitize_hours,
)

from .strategies import (
    Capability,
    RewardsCapable,
    PayCapable,
    StockOptionsCapable,
    FullTimeStrategy,
    PartTimeStrategy,
    ContractorStrategy,
    ExecutiveStrategy,
    capabilities,
    supports_pay,
    supports_stock_options,
    pay_or_none,
    get_strategy,
    round2,
)

from .selector import (
    StrategySelection,
    resolve_strategy,
    normalize_classification,
    tokens_for,
    FALLBACK_CLASSIFICATION,
)

from .operations import (
    HoursStatus,
    hours_status,
    report_hours,
)

from .schemas import (
    CompensationResult,
    ProfileSchema,
    RosterEntry,
)

from .sink import (
    Sink,
    FileSink,
    MemorySink,
    format_calc_line,
)

from .auth import AuthManager

from .calculator import calculate, calculate_batch

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
    "ProfileValidationError",
    "SettingsError",
    "get_data_path",
    "get_log_path",
    "get_prompt_defaults",
    # Employee
    "Classification",
    "EmployeeRecord",
    "sanitize_hours",
    # Strategies
    "Capability",
    "RewardsCapable",
    "PayCapable",
    "StockOptionsCapable",
    "FullTimeStrategy",
    "PartTimeStrategy",
    "ContractorStrategy",
    "ExecutiveStrategy",
    "capabilities",
    "supports_pay",
    "supports_stock_options",
    "pay_or_none",
    "get_strategy",
    "round2",
    # Selector
    "StrategySelection",
    "resolve_strategy",
    "normalize_classification",
    "tokens_for",
    "FALLBACK_CLASSIFICATION",
    # Hours reporting
    "HoursStatus",
    "hours_status",
    "report_hours",
    # Schemas
    "CompensationResult",
    "ProfileSchema",
    "RosterEntry",
    # Sink
    "Sink",
    "FileSink",
    "MemorySink",
    "format_calc_line",
    # Auth
    "AuthManager",
    # Calculation
    "calculate",
    "calculate_batch",
]
