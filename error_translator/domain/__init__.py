"""
Domain layer package.

Contains the resolution rules, response entities and the logger port.
No framework imports, no IO, no side effects.
"""
