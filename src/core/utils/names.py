def concat_name(first_name: str | None, last_name: str | None) -> str | None:
    """Join first and last name, or return whichever one is set. None when both are blank."""
    first = (first_name or "").strip()
    last = (last_name or "").strip()

    if not first and not last:
        return None
    if first and last:
        return f"{first} {last}"
    return first or last
