"""Runtime plumbing shared by the CLI: context, env, logging, serialization."""
