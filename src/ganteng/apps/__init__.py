"""Apps subpackage: user config, CLI and terminal UI."""
