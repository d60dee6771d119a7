"""Card store exceptions.

These exceptions provide semantic meaning for data access errors,
separating them from general database errors. Driver and connection
failures are not wrapped; they surface as SQLAlchemy ``DBAPIError``
subclasses.
"""


class RepositoryError(Exception):
    """Base exception for repository operations."""


class NotFoundError(RepositoryError):
    """Entity not found in database."""

    def __init__(self, entity_type: str, identifier: str | int):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(f"{entity_type} not found: {identifier}")


class BindError(RepositoryError):
    """Statement template references a parameter that was not supplied."""

    def __init__(self, template: str, name: str):
        self.template = template
        self.name = name
        super().__init__(f"missing value for parameter :{name}")
