ROLE_ADMIN = "admin"
ROLE_USER = "user"

# Higher rank satisfies every lower requirement
ROLE_RANK = {ROLE_USER: 1, ROLE_ADMIN: 2}


def role_satisfies(role, required: str) -> bool:
    return ROLE_RANK.get(role, 0) >= ROLE_RANK[required]


def default_name(email: str) -> str:
    return (email or "").split("@")[0]
