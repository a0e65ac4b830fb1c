"""
FXCalc App - Forex Trading Calculator Formula Library

A collection of stateless, deterministic formulas for forex trading
calculators: pip and lot conversion, position sizing and risk, trade
outcome, technical levels, money management and conversion utilities.
"""

__version__ = "0.1.0"
__author__ = "FXCalc Team"
