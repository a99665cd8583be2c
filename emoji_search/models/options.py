"""Per-request search options."""

from pydantic import BaseModel, ConfigDict, Field


class Options(BaseModel):
    """Personalization for a single search call.

    Options never outlive the call they are passed to and never modify the
    shared dataset.
    """

    model_config = ConfigDict(frozen=True)

    custom_keywords: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Emoji -> extra keywords appended to its built-in keywords",
    )
    custom_preferred_entity: dict[str, str] = Field(
        default_factory=dict,
        description="Keyword -> emoji preferred for it, overriding the built-in choice",
    )
    recently_searched: list[str] = Field(
        default_factory=list,
        description="Past queries, most recent first",
    )

    def recently_searched_index(self) -> dict[str, int]:
        """Map each recent query to its position; the most recent occurrence wins."""
        index: dict[str, int] = {}
        for idx, query in enumerate(self.recently_searched):
            index.setdefault(query, idx)
        return index
