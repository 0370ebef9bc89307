"""
Page controllers holding the state a front end renders.
"""
