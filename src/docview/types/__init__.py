"""Property data types: the type table, the property value and binary wrappers."""
