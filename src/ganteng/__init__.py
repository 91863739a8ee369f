__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy re-exports from ganteng.api and ganteng.core for convenience."""
    _api_names = {"TypingGanteng"}
    _core_names = {
        "DictionaryLoadError",
        "LoadState",
        "TransformConfig",
        "load_dictionary",
        "transform",
    }
    if name in _api_names:
        from ganteng import api

        return getattr(api, name)
    if name in _core_names:
        from ganteng import core

        return getattr(core, name)
    raise AttributeError(f"module 'ganteng' has no attribute {name!r}")
