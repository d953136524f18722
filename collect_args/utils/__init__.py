# =====================================================================
# File: utils/__init__.py
# Description: Utilities package initializer for collect_args
# =====================================================================

"""
Utility helpers for collect_args:
  - Leveled stderr logging
"""
