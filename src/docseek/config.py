"""Configuration settings for docseek."""

from pydantic_settings import BaseSettings

# Categories hidden from incremental search by default. Their elements are
# still parsed and kept on the owning source.
_DEFAULT_SKIP_CATEGORIES = [
    "package",
    "module",
    "Variable",
    "Exception",
    "Annotation",
    "Element",
]


class Settings(BaseSettings):
    """docseek configuration.

    Environment variables (prefix ``DOCSEEK_``):
    - DOCSEEK_FETCH_TIMEOUT: Remote index page timeout in seconds (default: 10)
    - DOCSEEK_SEARCH_DEPTH: Directory walk depth for directory seeds (default: 4)
    - DOCSEEK_SEARCH_PROGRAM_DIR: Also search around the running program
    - DOCSEEK_PROGRAM_SEARCH_DEPTH: Walk depth around the program (default: 2)
    - DOCSEEK_MAX_CONCURRENT_FETCHES: Bound on parallel fetch+parse (default: 8)
    - DOCSEEK_MAX_RESULTS: Default number of search results (default: 50)
    - DOCSEEK_SKIP_CATEGORIES: JSON list of categories left out of search
    - DOCSEEK_SEEDS: Extra seed URIs, comma separated
        Example: "file:///opt/app/docs,https://docs.example.org/api/index.html"
    - DOCSEEK_LOG_LEVEL: loguru level used by the command line (default: INFO)
    """

    # Discovery
    search_depth: int = 4
    search_program_dir: bool = False
    program_search_depth: int = 2
    seeds: str = ""

    # Fetching
    fetch_timeout: float = 10.0
    max_concurrent_fetches: int = 8

    # Search
    max_results: int = 50
    skip_categories: list[str] = list(_DEFAULT_SKIP_CATEGORIES)

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "DOCSEEK_", "case_sensitive": False}

    def get_seeds(self) -> list[str]:
        """Parse DOCSEEK_SEEDS into a list of seed URIs.

        Format: "file:///a/docs,https://example.org/api/index.html"

        Blank items and surrounding whitespace are ignored.
        """
        if not self.seeds:
            return []
        return [seed.strip() for seed in self.seeds.split(",") if seed.strip()]


settings = Settings()
