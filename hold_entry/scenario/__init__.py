"""
Scenario module.

Random practice scenarios and the text shown to the trainee.
"""

from .generator import HoldingScenario, generate_scenario, random_heading, random_hold
from .instructions import (
    ASSUMPTION_TEXT,
    format_holding_instructions,
    format_leg_length,
    format_solution,
    scenario_to_dict,
)

__all__ = [
    "ASSUMPTION_TEXT",
    "HoldingScenario",
    "format_holding_instructions",
    "format_leg_length",
    "format_solution",
    "generate_scenario",
    "random_heading",
    "random_hold",
    "scenario_to_dict",
]
