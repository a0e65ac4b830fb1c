"""
Value records passed into and out of calculator formulas.
"""
