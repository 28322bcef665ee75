"""
Logging, error types and small helpers shared by the application.
"""
