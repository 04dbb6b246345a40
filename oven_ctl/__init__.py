"""
Oven Ctl - Baking Oven Program Controller

Executes baking programs made of ordered stages by driving a heating module
and a circulation fan in a fixed command order, and reports a single domain
failure when the heating module cannot be commanded.
"""

__version__ = "0.1.0"
__author__ = "Oven Ctl Team"
