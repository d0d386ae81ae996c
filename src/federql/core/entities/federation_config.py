"""Federation configuration entity."""

from dataclasses import dataclass


@dataclass
class FederationConfig:
    """Federation configuration.

    Controls how a schema is turned into a subgraph schema: the name of a
    synthetic query type, what ``_service { sdl }`` returns, and how
    representations are coerced.
    """

    # Name given to the query type when the schema has none
    query_type_name: str = "Query"

    # SDL returned by _service; printed from the schema when not set
    service_sdl: str | None = None
    include_service_field: bool = True

    # Convert camelCase representation keys to snake_case
    underscore_keys: bool = False

    # Log per-reference failures at WARNING instead of DEBUG
    debug: bool = False

    def __post_init__(self) -> None:
        """Validate the query type name."""
        if not self.query_type_name:
            raise ValueError("query_type_name must not be empty")
