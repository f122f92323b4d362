"""Registry messages and environment variable names (private)."""

SOURCE_PATH_EMPTY_MESSAGE = "Source path is empty"
DIRECTORY_NOT_FOUND_ERROR = "Directory does not exist: %s"
NO_SYNC_CONFIGURATION_MESSAGE = (
    "Please provide at least one sync configuration or set the CONTENT_SYNC environment variable"
)

# Comma-separated "source<os.pathsep>target" entries used when no input is configured
SYNC_ENV_VAR = "CONTENT_SYNC"
# Comma-separated ignore patterns applied to mappings taken from SYNC_ENV_VAR
IGNORED_ENV_VAR = "CONTENT_SYNC_IGNORED"

REGEX_PATTERN_PREFIX = "re:"
