"""
Terminal front end: human vs engine.
"""
