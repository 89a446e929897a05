"""
Catalog services: storage, filtering, sorting, pagination and listing state
"""
