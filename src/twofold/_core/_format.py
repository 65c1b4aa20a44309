from ._config import get_config


def payload_repr(v: object) -> str:
    text = repr(v)
    limit = get_config().repr_max_length
    if len(text) > limit:
        return text[:limit] + "..."
    return text
