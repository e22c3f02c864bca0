"""Contains exceptions raised when reconciling application configuration."""

from release_ops_manager.exceptions import ConfigurationError


class RequiredConfigurationElementError(ConfigurationError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name} (command line option {cli_name}, environment variable {env_name})")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name


class IncompleteJiraConfigurationError(ConfigurationError):
    """Raised when only part of the Jira configuration is provided."""

    def __init__(self, missing: list[RequiredConfigurationElementError]) -> None:
        """Initializes the exception with the missing configuration elements."""
        super().__init__(
            "Incomplete Jira configuration - missing settings include "
            + ", ".join(f"{element.name} (command line option {element.cli_name}, environment variable {element.env_name})" for element in missing)
        )
        self.missing = missing
