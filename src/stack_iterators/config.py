"""Configuration management for the demo."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .data_generator import ELEMENT_KINDS

# Load environment variables from .env file
load_dotenv()


@dataclass
class DemoConfig:
    """Demo configuration parameters."""

    stack_size: int = 5
    element_kind: str = "int"
    seed: int = 42
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load demo configuration from environment variables."""
        return cls(
            stack_size=int(os.getenv("STACK_SIZE", "5")),
            element_kind=os.getenv("ELEMENT_KIND", "int").lower(),  # int, name, word
            seed=int(os.getenv("ELEMENT_SEED", "42")),
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.stack_size < 0:
            raise ValueError("stack_size must not be negative")
        if self.element_kind not in ELEMENT_KINDS:
            raise ValueError(
                f"Unknown element kind: {self.element_kind}. "
                f"Valid options: {', '.join(ELEMENT_KINDS)}"
            )


def get_demo_config() -> DemoConfig:
    """Get demo configuration."""
    return DemoConfig.from_env()
