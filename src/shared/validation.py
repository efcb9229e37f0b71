"""Input checks applied before a command reaches its aggregate."""

from protean.exceptions import ValidationError


def require_fields(values: dict, *names: str) -> None:
    """Raise one ``ValidationError`` naming every missing or blank field."""
    missing = {}
    for name in names:
        value = values.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing[name] = ["is required"]
    if missing:
        raise ValidationError(missing)
