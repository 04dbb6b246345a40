"""
Controller lifecycle state module.

Tracks the progress of a program run through
IDLE → INITIAL_HEATUP → RUNNING_STAGE → FINISHING → DONE, or FAILED.
"""
