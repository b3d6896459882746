"""
Hold Entry - Holding Pattern Entry Trainer

A training aid that models holding-pattern geometry. Given a published hold
and an aircraft's course to the fix, determines whether a Direct, Teardrop
or Parallel entry applies, and generates randomized practice scenarios.
"""

__version__ = "0.1.0"
__author__ = "Hold Entry Team"
