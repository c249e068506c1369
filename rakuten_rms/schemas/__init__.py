"""
Wire schemas for RMS WEB SERVICE requests and responses.
"""
