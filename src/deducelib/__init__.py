__all__ = [
    "BaseReporter",
    "ChainNotes",
    "ChainRound",
    "ChainTemplate",
    "DeductionException",
    "DeductionTooDeep",
    "Grid",
    "InvalidGrid",
    "InvalidUpdate",
    "LoggingReporter",
    "Solution",
    "StrategyDriver",
    "Update",
    "apply_solution",
    "apply_solutions",
    "apply_strategies",
    "apply_update",
    "chain_template",
    "find_chain_overlap_updates",
    "solve_single_option",
    "solve_single_option_full_grid",
    "solve_single_param",
    "solve_single_param_full_grid",
    "solve_x_chain",
    "solve_x_chain_full_grid",
    "__version__",
]

__version__ = "0.1.0.dev0"


from .chains import (
    ChainTemplate,
    chain_template,
    find_chain_overlap_updates,
    solve_x_chain,
    solve_x_chain_full_grid,
)
from .drivers import StrategyDriver, apply_strategies
from .exceptions import (
    DeductionException,
    DeductionTooDeep,
    InvalidGrid,
    InvalidUpdate,
)
from .reporters import BaseReporter, LoggingReporter
from .strategies import (
    solve_single_option,
    solve_single_option_full_grid,
    solve_single_param,
    solve_single_param_full_grid,
)
from .structs import (
    ChainNotes,
    ChainRound,
    Grid,
    Solution,
    Update,
    apply_solution,
    apply_solutions,
    apply_update,
)
