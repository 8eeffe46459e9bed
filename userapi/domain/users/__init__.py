"""
Users bounded context — domain layer.
"""
