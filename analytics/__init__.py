"""
Weekday aggregation, chart helpers and the HTTP API over the health store.
"""
