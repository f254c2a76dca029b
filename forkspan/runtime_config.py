"""Runtime configuration state management."""

# Global runtime configuration state
_config = {
    "debug": False,
    "warn_on_empty_pop": False,
}


def set_debug(value: bool) -> None:
    _config["debug"] = value


def get_debug() -> bool:
    return _config["debug"]


def set_warn_on_empty_pop(value: bool) -> None:
    _config["warn_on_empty_pop"] = value


def get_warn_on_empty_pop() -> bool:
    return _config["warn_on_empty_pop"]
