def extract_user_data_from_jwt(payload: dict) -> dict:
    """Extract subscriber data from identity provider claims for database sync."""
    external_id = payload.get("sub", "")

    user_metadata = payload.get("user_metadata", {}) or {}

    full_name = " ".join(
        part for part in (payload.get("given_name"), payload.get("family_name")) if part
    )
    name = (
        payload.get("name")
        or user_metadata.get("full_name")
        or user_metadata.get("name")
        or full_name
    )

    return {
        "external_id": external_id,
        "email": payload.get("email", "") or "",
        "name": name or "",
    }
