"""
Chaos Intelligence Tool Catalog

Every module in this directory that defines a module-level TOOLS list is
collected by registry.py. Modules without TOOLS (e.g. common.py) are skipped.
"""

# Tools are auto-discovered, no explicit imports needed
