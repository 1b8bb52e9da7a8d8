from dataclasses import dataclass


@dataclass
class User:
    """One row of the users sheet: username | password | role."""
    username: str
    password: str  # stored and compared as plaintext
    role: str
