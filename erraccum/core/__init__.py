# erraccum/core/__init__.py
"""
Core accumulation engine: classification, record synthesis, merging and
aggregate emission.

No side effects on import.
"""
