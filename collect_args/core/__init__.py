# =====================================================================
# File: core/__init__.py
# Description: Core package initializer for collect_args
# =====================================================================

"""
Core components of collect_args:
  - Argument snapshot and its lookups (input, select, options, flag)
  - Named result tuples
  - Configuration and defaults
  - Replay of recorded invocations (YAML)
"""
