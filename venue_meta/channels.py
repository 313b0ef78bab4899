from __future__ import annotations

# Linked left/right channels are exported as "Name-L, Name-R".
PAIR_SEPARATOR = ", "
LEFT_SUFFIX = "-L"
RIGHT_SUFFIX = "-R"


def _pair_base(raw: str) -> str | None:
    parts = raw.split(PAIR_SEPARATOR)
    if len(parts) != 2:
        return None
    left, right = parts
    if not (left.endswith(LEFT_SUFFIX) and right.endswith(RIGHT_SUFFIX)):
        return None
    base = left[: -len(LEFT_SUFFIX)]
    if not base or base != right[: -len(RIGHT_SUFFIX)]:
        return None
    return base


def is_stereo_pair(raw: str) -> bool:
    return _pair_base(raw) is not None


def clean_name(raw: str) -> str:
    """Collapse a stereo pair label ("eGit-L, eGit-R") into its base name.

    Anything that is not exactly such a pair is returned unchanged.
    """
    base = _pair_base(raw)
    return raw if base is None else base
