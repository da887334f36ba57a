"""
Task subsystem.

Components:
- ticker_task.py: TickerTask (pausable periodic task) and the default logging failure reporter
"""
