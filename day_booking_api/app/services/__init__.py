"""
Service layer.

Each service receives the application's ``Database`` in its constructor
and encapsulates the SQL and business rules for one concern, so API
handlers only translate between HTTP and service calls.
"""
