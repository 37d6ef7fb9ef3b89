"""Default configuration for termlookup."""

# Source endpoints and transport defaults
DEFAULT_LOOKUP_CONFIG: dict[str, str | float] = {
    "dictionary_url": "https://api.dictionaryapi.dev",
    "encyclopedia_url": "https://en.wikipedia.org",
    "user_agent": "lookup-cli/0.1 (https://github.com/example/lookup)",
    "timeout": 10.0,  # seconds
}
