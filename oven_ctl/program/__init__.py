"""
Baking program module.

Immutable value objects describing what the oven should do, fluent builders
for assembling them, and normalization of raw program data.
"""
