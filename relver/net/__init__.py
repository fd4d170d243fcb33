"""Network access used by the resolver."""
