from .cost import dig_cost, rank_by_cost
from .filters import standard_tool_filter
from .selector import ToolSelector

__all__ = [
    'dig_cost',
    'rank_by_cost',
    'standard_tool_filter',
    'ToolSelector',
]
