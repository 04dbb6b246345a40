"""
Actuator interfaces module.

Abstract command interfaces of the heating module and the circulation fan,
plus dry-run implementations that only log and journal commands.
"""
