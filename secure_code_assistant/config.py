"""Configuration for the Secure Code Assistant."""

from dataclasses import dataclass
from pathlib import Path
import os


BUNDLED_RULES_PATH = Path(__file__).parent / "rules" / "python-security.yml"


@dataclass
class AssistantConfig:
    """Configuration for scanning and quick fixes."""

    # Analyzer settings
    analyzer: str = "semgrep"
    rules_path: Path = BUNDLED_RULES_PATH

    # Only documents with this language id are scanned
    language_id: str = "python"

    # Name of the diagnostics collection shown by the host
    collection_name: str = "security"

    # Drop scan completions superseded by a newer scan of the same document
    discard_stale_results: bool = True

    @classmethod
    def from_env(cls) -> "AssistantConfig":
        """Create config from environment variables."""
        rules_path = os.environ.get("SCA_RULES_PATH")
        return cls(
            analyzer=os.environ.get("SCA_ANALYZER", "semgrep"),
            rules_path=Path(rules_path) if rules_path else BUNDLED_RULES_PATH,
            language_id=os.environ.get("SCA_LANGUAGE_ID", "python"),
            discard_stale_results=os.environ.get("SCA_DISCARD_STALE_RESULTS", "true").lower() == "true",
        )


# Default configuration
DEFAULT_CONFIG = AssistantConfig()
