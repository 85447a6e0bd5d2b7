"""
Utilities package for the pizzeria order pipeline
Contains id allocation, configuration, logging and validation helpers
"""
