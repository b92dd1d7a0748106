from .evaluation import (
    ComfortCategory,
    ComfortResult,
    SamplingMethod,
    CATEGORIES,
    draught_rate,
    get_velocity_category,
    worst_case_velocity,
    evaluate_comfort
)
from .summary import get_comfort_summary
