import os


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_optional_str(env_var: str) -> str | None:
    """Return the stripped value of ``env_var`` or ``None`` when unset or blank."""

    value = os.environ.get(env_var)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
