from .charts import (
    create_heat_radar,
    create_organizational_chart,
    create_performance_chart,
    create_school_size_chart,
)

__all__ = [
    "create_heat_radar",
    "create_organizational_chart",
    "create_performance_chart",
    "create_school_size_chart",
]
