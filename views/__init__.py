"""
Flask blueprints for the JSON API.
"""
