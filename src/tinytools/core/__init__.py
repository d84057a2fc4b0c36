"""
Shared configuration and helpers used by every tool.
"""
