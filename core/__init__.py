# Core package - foundational components
#
# Modules:
# - config: SDK settings
# - logging: Structured logging
# - models: Credentials, session records and request descriptors
# - session_store: Pluggable session persistence (memory, JSON file)
