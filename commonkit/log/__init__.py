"""Context-aware structured logging and the writer, SQL and search-request adapters that feed it."""