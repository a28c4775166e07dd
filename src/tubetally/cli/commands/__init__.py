"""
Command groups registered on the tubetally CLI.
"""
