"""
Pydantic schema definitions for API payloads.

Each resource kind (users, products, tasks) defines the model of its
stored entity.  Attributes are snake_case in Python and camelCase on
the wire (``createdAt``, ``dueDate``) via field aliases.
"""
