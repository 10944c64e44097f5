"""
Domain layer

Entities and value objects of the customer registry.
"""
