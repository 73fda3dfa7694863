"""
models/ - Domain Models
=======================
Plain dataclasses and in-memory state with no database or Telegram dependencies.
"""
