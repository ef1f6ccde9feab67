"""Core building blocks: settings, pagination engine, query builder, envelopes, errors."""
