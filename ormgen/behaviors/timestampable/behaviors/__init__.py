"""
Schema-attachable behaviors.

A behavior is attached to a single table, may add columns to it while the schema is built, and
contributes source fragments to the classes generated for that table.
"""
