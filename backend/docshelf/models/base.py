import uuid


def generate_id() -> str:
    """New opaque identifier: lowercase UUID4 text"""
    return str(uuid.uuid4())
